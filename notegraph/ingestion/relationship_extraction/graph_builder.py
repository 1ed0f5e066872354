"""Building relationship graphs from notes, references and note content."""

from collections import Counter
from typing import Iterable, Mapping

from loguru import logger

from notegraph.domain.graph import (
    CROSS_REFERENCE_WEIGHT,
    EXPLICIT_LINK_WEIGHT,
    GraphData,
    GraphLink,
    GraphNode,
)
from notegraph.domain.note import ExplicitReference, NoteMeta
from notegraph.ingestion.content_extractor import ContentExtractor

from . import analyzer
from .cross_references import CrossReferenceDetector
from .resolver import ReferenceResolver


class _BuildState:
    """Mutable bookkeeping for a single build. Discarded once the snapshot is frozen."""

    def __init__(self, nodes: dict[str, GraphNode]):
        self.nodes = nodes
        self.incoming: Counter[str] = Counter()
        self.outgoing: Counter[str] = Counter()
        self.links: dict[tuple[str, str], dict] = {}  # (source, target) -> link fields
        self.observed: set[tuple[str, str]] = set()  # explicit directed observations

    def is_linked(self, a: str, b: str) -> bool:
        return (a, b) in self.links or (b, a) in self.links

    def count_edge(self, source_id: str, target_id: str) -> None:
        self.outgoing[source_id] += 1
        self.incoming[target_id] += 1

    def add_link(self, source_id: str, target_id: str, weight: float) -> None:
        self.links[(source_id, target_id)] = {
            "source": source_id,
            "target": target_id,
            "bidirectional": False,
            "weight": weight,
        }


class GraphBuilder:
    """Builds graph snapshots from notes and their relationships."""

    def __init__(
        self,
        *,
        content_extractor: ContentExtractor | None = None,
        cross_reference_detector: CrossReferenceDetector | None = None,
        hub_min_connections: int = analyzer.HUB_MIN_CONNECTIONS,
        hub_percentile: float = analyzer.HUB_PERCENTILE,
    ):
        """Initialize the builder.

        Args:
            content_extractor: Extractor used for tags
            cross_reference_detector: Detector used for heuristic cross-references
            hub_min_connections: Absolute minimum connection count for a hub
            hub_percentile: Fraction of the graph that can qualify as hubs
        """
        self.content_extractor = content_extractor or ContentExtractor()
        self.cross_reference_detector = cross_reference_detector or CrossReferenceDetector()
        self.hub_min_connections = hub_min_connections
        self.hub_percentile = hub_percentile

    def build(
        self,
        notes: Iterable[NoteMeta],
        explicit_references: Iterable[ExplicitReference],
        content_by_note_id: Mapping[str, str],
        active_note_id: str | None = None,
    ) -> GraphData:
        """Build a graph snapshot.

        Args:
            notes: Vault entries; folder entries are skipped
            explicit_references: Hand-written references, targets still unresolved
            content_by_note_id: Raw note text by note id; missing notes count as empty
            active_note_id: Id of the currently open note, if any

        Returns:
            Frozen GraphData snapshot
        """
        nodes, clusters, tags = self._create_nodes(notes, content_by_note_id, active_note_id)
        resolver = ReferenceResolver(nodes.values())
        state = _BuildState(nodes)

        self._add_explicit_references(state, resolver, explicit_references)
        self._add_cross_references(state, resolver, content_by_note_id)

        graph = self._freeze(state, clusters, tags)
        logger.debug(
            f"Built graph with {len(graph.nodes)} nodes, {len(graph.links)} links, "
            f"{graph.orphan_count} orphans"
        )
        return graph

    def _create_nodes(
        self,
        notes: Iterable[NoteMeta],
        content_by_note_id: Mapping[str, str],
        active_note_id: str | None,
    ) -> tuple[dict[str, GraphNode], dict[str, list[str]], dict[str, list[str]]]:
        """Create one node per note and record folder clusters and tag membership.

        Returns:
            Tuple of (nodes by id, folder clusters, tag index)
        """
        nodes: dict[str, GraphNode] = {}
        clusters: dict[str, list[str]] = {}
        tags: dict[str, list[str]] = {}
        folder_to_group: dict[str, int] = {}

        for note in notes:
            if note.type == "folder" or note.id in nodes:
                continue

            folder_path = note.folder_path
            group = folder_to_group.setdefault(folder_path, len(folder_to_group))
            note_tags = self.content_extractor.extract_tags(content_by_note_id.get(note.id) or "")

            nodes[note.id] = GraphNode(
                id=note.id,
                title=note.title or note.id,
                path=note.path,
                group=group,
                tags=note_tags,
                is_active=note.id == active_note_id,
            )

            clusters.setdefault(folder_path, []).append(note.id)
            for tag in note_tags:
                tags.setdefault(tag, []).append(note.id)

        return nodes, clusters, tags

    def _add_explicit_references(
        self,
        state: _BuildState,
        resolver: ReferenceResolver,
        explicit_references: Iterable[ExplicitReference],
    ) -> None:
        """Fold explicit references into the link table.

        A reference observed in both directions becomes one bidirectional link.
        """
        for reference in explicit_references:
            source = state.nodes.get(reference.source)
            target = resolver.resolve(reference.target)
            if source is None or target is None or source.id == target.id:
                continue

            pair = (source.id, target.id)
            if pair in state.observed:
                continue
            state.observed.add(pair)
            state.count_edge(source.id, target.id)

            reverse = (target.id, source.id)
            if reverse in state.links:
                state.links[reverse]["bidirectional"] = True
            else:
                state.add_link(source.id, target.id, EXPLICIT_LINK_WEIGHT)

    def _add_cross_references(
        self,
        state: _BuildState,
        resolver: ReferenceResolver,
        content_by_note_id: Mapping[str, str],
    ) -> None:
        """Fold detected cross-references into the link table.

        Pairs that are already linked, in either direction, are left untouched.
        """
        for source_id in state.nodes:
            content = content_by_note_id.get(source_id) or ""
            if not content:
                continue

            for candidate in self.cross_reference_detector.detect(content):
                target = resolver.resolve(candidate)
                if target is None or target.id == source_id:
                    continue
                if state.is_linked(source_id, target.id):
                    continue

                state.add_link(source_id, target.id, CROSS_REFERENCE_WEIGHT)
                state.count_edge(source_id, target.id)

    def _freeze(
        self,
        state: _BuildState,
        clusters: dict[str, list[str]],
        tags: dict[str, list[str]],
    ) -> GraphData:
        """Finalize counts, classify hubs and orphans, and produce the snapshot."""
        connection_counts = {
            node_id: state.incoming[node_id] + state.outgoing[node_id] for node_id in state.nodes
        }
        threshold = analyzer.calculate_hub_threshold(
            list(connection_counts.values()),
            percentile=self.hub_percentile,
            default=self.hub_min_connections,
        )

        nodes = [
            node.model_copy(
                update={
                    "incoming_count": state.incoming[node_id],
                    "outgoing_count": state.outgoing[node_id],
                    "connection_count": connection_counts[node_id],
                    "is_orphan": connection_counts[node_id] == 0,
                    "is_hub": analyzer.is_hub(
                        connection_counts[node_id], threshold, self.hub_min_connections
                    ),
                }
            )
            for node_id, node in state.nodes.items()
        ]

        return GraphData(
            nodes=nodes,
            links=[GraphLink(**fields) for fields in state.links.values()],
            clusters=clusters,
            tags=tags,
        )
