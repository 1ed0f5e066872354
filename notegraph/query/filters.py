"""Filter pipeline producing narrowed graph snapshots."""

from notegraph.domain.graph import FilterOptions, GraphData, GraphLink, GraphNode

from .traversal import neighborhood


def _links_between(links: list[GraphLink], node_ids: set[str]) -> list[GraphLink]:
    return [link for link in links if link.source in node_ids and link.target in node_ids]


def filter_graph(graph: GraphData, options: FilterOptions) -> GraphData:
    """Narrow a snapshot by the given options.

    Steps run in this order, each narrowing the previous result: local neighborhood,
    search, orphan visibility, tags, folders. Criteria inside one step are OR-ed.
    Links survive when both endpoints survive. clusters and tags describe the full
    snapshot and are passed through unchanged.

    The local neighborhood is computed once, on the full snapshot, before any other
    step. Later steps may drop the center or the nodes joining it to the rest.

    Args:
        graph: Snapshot to filter, left untouched
        options: Filter options; unset options do not filter

    Returns:
        New GraphData snapshot
    """
    nodes: list[GraphNode] = list(graph.nodes)

    if options.local_graph_center and options.local_graph_depth and options.local_graph_depth > 0:
        local_ids = neighborhood(graph, options.local_graph_center, options.local_graph_depth)
        nodes = [node for node in nodes if node.id in local_ids]

    if options.search_query:
        query = options.search_query.lower()
        nodes = [node for node in nodes if query in node.title.lower() or query in node.id.lower()]

    if not options.show_orphans:
        nodes = [node for node in nodes if not node.is_orphan]

    if options.selected_tags:
        selected_tags = set(options.selected_tags)
        nodes = [node for node in nodes if selected_tags.intersection(node.tags)]

    if options.selected_folders:
        folder_node_ids = {
            node_id
            for folder in options.selected_folders
            for node_id in graph.clusters.get(folder, [])
        }
        nodes = [node for node in nodes if node.id in folder_node_ids]

    links = _links_between(graph.links, {node.id for node in nodes})

    return GraphData(nodes=nodes, links=links, clusters=graph.clusters, tags=graph.tags)
