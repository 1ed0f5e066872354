"""Graph traversal over snapshots: neighborhoods, shortest paths and path links.

Direction is ignored for traversal. Adjacency is rebuilt on every call, which keeps each
query O(V + E) and independent of any other query on the same snapshot.
"""

from collections import deque
from typing import List

from notegraph.domain.graph import GraphData, GraphLink


def build_adjacency(graph: GraphData) -> dict[str, set[str]]:
    """Build an undirected adjacency mapping for every node in the snapshot.

    Links whose endpoints are not nodes of this snapshot are ignored.
    """
    adjacency: dict[str, set[str]] = {node.id: set() for node in graph.nodes}

    for link in graph.links:
        if link.source in adjacency and link.target in adjacency:
            adjacency[link.source].add(link.target)
            adjacency[link.target].add(link.source)

    return adjacency


def neighborhood(graph: GraphData, center_id: str, depth: int) -> set[str]:
    """Get all node ids within depth hops of center_id.

    The center is always included, also for depth 0. An id that is not in the snapshot
    yields an empty set.
    """
    adjacency = build_adjacency(graph)
    if center_id not in adjacency:
        return set()

    visited = {center_id}
    queue = deque([(center_id, 0)])  # (node_id, level)

    while queue:
        current_id, level = queue.popleft()
        if level >= depth:
            continue

        for neighbor_id in adjacency[current_id]:
            if neighbor_id not in visited:
                visited.add(neighbor_id)
                queue.append((neighbor_id, level + 1))

    return visited


def shortest_path(graph: GraphData, start_id: str, end_id: str) -> List[str]:
    """Find the shortest path between two nodes.

    Returns:
        Node ids from start_id to end_id, [start_id] when both are the same, and an empty
        list when no path exists or either id is unknown.
    """
    if start_id == end_id:
        return [start_id]

    adjacency = build_adjacency(graph)
    if start_id not in adjacency or end_id not in adjacency:
        return []

    parents: dict[str, str] = {}
    visited = {start_id}
    queue = deque([start_id])

    while queue:
        current_id = queue.popleft()

        for neighbor_id in sorted(adjacency[current_id]):
            if neighbor_id in visited:
                continue
            visited.add(neighbor_id)
            parents[neighbor_id] = current_id

            if neighbor_id == end_id:
                path = [end_id]
                while path[-1] != start_id:
                    path.append(parents[path[-1]])
                path.reverse()
                return path

            queue.append(neighbor_id)

    return []  # No path found


def links_for_path(graph: GraphData, path: List[str]) -> List[GraphLink]:
    """Get the links connecting consecutive nodes of a path.

    Hops with no link in this snapshot are skipped, so a path computed against another
    snapshot still projects whatever links it can.
    """
    if len(path) < 2:
        return []

    path_links = []
    for from_id, to_id in zip(path, path[1:]):
        link = next((link for link in graph.links if link.connects(from_id, to_id)), None)
        if link is not None:
            path_links.append(link)

    return path_links
