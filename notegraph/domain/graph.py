"""Graph domain models.

Snapshots are frozen once the builder returns them. Filtering and traversal only ever
produce new objects. Field names serialize to camelCase for the visualization layer.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

EXPLICIT_LINK_WEIGHT = 1.0
CROSS_REFERENCE_WEIGHT = 0.5


class GraphNode(BaseModel):
    """Represents a single note in the graph.

    Attributes:
        id: Note id (storage key)
        title: Display name, the id when the note has no title
        path: Folder location of the note
        group: Cluster id, one per unique folder path in first-seen order
        incoming_count: Number of links pointing at this node
        outgoing_count: Number of links leaving this node
        connection_count: incoming_count + outgoing_count
        tags: Unique tags found in the note content
        is_orphan: True when no link touches the node
        is_hub: True for highly connected nodes (top decile and at least 5 connections)
        is_active: True for the note that was open at build time
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    path: str | None = None
    group: int = 0
    incoming_count: int = 0
    outgoing_count: int = 0
    connection_count: int = 0
    tags: list[str] = []
    is_orphan: bool = True
    is_hub: bool = False
    is_active: bool = False


class GraphLink(BaseModel):
    """Represents a relationship between two distinct notes."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    source: str
    target: str
    bidirectional: bool = False
    weight: float = EXPLICIT_LINK_WEIGHT

    def connects(self, a: str, b: str) -> bool:
        """Whether this link joins a and b, in either orientation."""
        return (self.source == a and self.target == b) or (self.source == b and self.target == a)


class GraphData(BaseModel):
    """A complete graph snapshot."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    nodes: list[GraphNode] = []
    links: list[GraphLink] = []
    clusters: dict[str, list[str]] = {}  # folder path -> node ids
    tags: dict[str, list[str]] = {}  # tag -> node ids

    def get_node(self, node_id: str) -> GraphNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    @property
    def orphan_count(self) -> int:
        return sum(1 for node in self.nodes if node.is_orphan)


class FilterOptions(BaseModel):
    """Options accepted by the filter pipeline. Unset options do not filter."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    search_query: str | None = None
    show_orphans: bool = True
    selected_tags: list[str] = []
    selected_folders: list[str] = []
    local_graph_center: str | None = None
    local_graph_depth: int | None = None


class GraphStats(BaseModel):
    """Aggregate counts reported alongside a snapshot."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    node_count: int
    link_count: int
    orphan_count: int
    hub_count: int
    bidirectional_count: int
    cluster_count: int
    tag_count: int
