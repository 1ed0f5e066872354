"""Analysis functions for node classification and graph statistics."""

import math

from notegraph.domain.graph import GraphData, GraphStats

HUB_MIN_CONNECTIONS = 5
HUB_PERCENTILE = 0.1


def calculate_hub_threshold(
    connection_counts: list[int],
    percentile: float = HUB_PERCENTILE,
    default: int = HUB_MIN_CONNECTIONS,
) -> int:
    """Connection count a node needs to rank in the top percentile of the graph.

    Args:
        connection_counts: Connection count of every node, in any order
        percentile: Fraction of the graph considered "top"
        default: Threshold used for an empty graph

    Returns:
        The count at rank floor(n * percentile) of the descending counts
    """
    if not connection_counts:
        return default

    ranked = sorted(connection_counts, reverse=True)
    index = min(math.floor(len(ranked) * percentile), len(ranked) - 1)
    return ranked[index]


def is_hub(
    connection_count: int, threshold: int, min_connections: int = HUB_MIN_CONNECTIONS
) -> bool:
    """A hub is in the top percentile and has at least min_connections connections.

    The absolute floor keeps tiny graphs from producing hubs out of noise.
    """
    return connection_count >= threshold and connection_count >= min_connections


def calculate_graph_stats(graph: GraphData) -> GraphStats:
    """Aggregate counts for a snapshot."""
    return GraphStats(
        node_count=len(graph.nodes),
        link_count=len(graph.links),
        orphan_count=graph.orphan_count,
        hub_count=sum(1 for node in graph.nodes if node.is_hub),
        bidirectional_count=sum(1 for link in graph.links if link.bidirectional),
        cluster_count=len(graph.clusters),
        tag_count=len(graph.tags),
    )
