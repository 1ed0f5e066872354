"""Orchestration service for building and querying the vault graph."""

from typing import List

from loguru import logger

from notegraph.domain.graph import FilterOptions, GraphData, GraphLink, GraphStats
from notegraph.domain.note import ExplicitReference, NoteMeta
from notegraph.errors import FolderNotFoundError
from notegraph.query.filters import filter_graph
from notegraph.query.folders import resolve_folder
from notegraph.query.traversal import links_for_path, neighborhood, shortest_path

from .content_extractor import ContentExtractor
from .relationship_extraction import GraphBuilder
from .relationship_extraction.analyzer import calculate_graph_stats
from .vault_loader import VaultLoader


class GraphOrchestrator:
    """Loads a vault, builds graph snapshots and answers queries against the latest one."""

    def __init__(
        self,
        *,
        loader: VaultLoader,
        graph_builder: GraphBuilder | None = None,
        content_extractor: ContentExtractor | None = None,
    ):
        """Initialize the orchestrator with required services.

        Args:
            loader: Vault loader providing notes and their content
            graph_builder: Builder for graph snapshots
            content_extractor: Extractor used for explicit references
        """
        self.loader = loader
        self.graph_builder = graph_builder or GraphBuilder()
        self.content_extractor = content_extractor or ContentExtractor()

        self._notes: list[NoteMeta] = []
        self._snapshot: GraphData | None = None

    @property
    def snapshot(self) -> GraphData:
        """Latest completed snapshot, built on first access."""
        if self._snapshot is None:
            return self.refresh()
        return self._snapshot

    @property
    def notes(self) -> list[NoteMeta]:
        """Vault entries used for the latest snapshot."""
        if self._snapshot is None:
            self.refresh()
        return self._notes

    def refresh(self, active_note_id: str | None = None) -> GraphData:
        """Reload the vault and build a new snapshot.

        The previous snapshot stays in place until the new one is complete.

        Args:
            active_note_id: Id of the currently open note, if any

        Returns:
            The new snapshot
        """
        notes = self.loader.list_notes()
        contents = self.loader.load_contents(notes)
        references = self._extract_references(contents)

        logger.info(
            f"Building graph from {len(notes)} entries, {len(contents)} loaded, "
            f"{len(references)} references"
        )
        snapshot = self.graph_builder.build(notes, references, contents, active_note_id)

        self._notes = notes
        self._snapshot = snapshot

        logger.info(
            f"Graph built: {len(snapshot.nodes)} nodes, {len(snapshot.links)} links, "
            f"{snapshot.orphan_count} orphans"
        )
        return snapshot

    def filter(self, options: FilterOptions) -> GraphData:
        return filter_graph(self.snapshot, options)

    def neighborhood(self, center_id: str, depth: int) -> set[str]:
        return neighborhood(self.snapshot, center_id, depth)

    def shortest_path(self, start_id: str, end_id: str) -> tuple[List[str], List[GraphLink]]:
        """Shortest path between two notes together with the links to highlight."""
        snapshot = self.snapshot
        path = shortest_path(snapshot, start_id, end_id)
        return path, links_for_path(snapshot, path)

    def stats(self) -> GraphStats:
        return calculate_graph_stats(self.snapshot)

    def resolve_folder(self, query: str) -> str:
        """Full path of the folder a query names.

        Raises:
            FolderNotFoundError: If no folder matches the query
        """
        folder = resolve_folder(self.notes, query)
        if folder is None:
            raise FolderNotFoundError(f"Folder not found: {query}")
        return folder

    def _extract_references(self, contents: dict[str, str]) -> list[ExplicitReference]:
        """Extract explicit references from every loaded note."""
        references: list[ExplicitReference] = []
        for note_id, content in contents.items():
            references.extend(self.content_extractor.extract_references(note_id, content))
        return references
