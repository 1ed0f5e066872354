from pathlib import Path
from typing import Any, Callable, Generator

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from notegraph.api import create_app
from notegraph.domain.graph import GraphData, GraphLink, GraphNode
from notegraph.domain.note import ExplicitReference, NoteMeta
from notegraph.ingestion.orchestrator import GraphOrchestrator
from notegraph.ingestion.relationship_extraction import GraphBuilder
from notegraph.ingestion.vault_loader import VaultLoader


@pytest.fixture
def graph_builder() -> GraphBuilder:
    return GraphBuilder()


@pytest.fixture
def build_graph(
    graph_builder: GraphBuilder,
) -> Callable[..., GraphData]:
    """Build a graph from note ids and {source: [targets]} references.

    Note ids may carry a folder ("inbox/a.md"); the folder becomes the note's path.
    """

    def _build(
        note_ids: list[str],
        references: dict[str, list[str]] | None = None,
        contents: dict[str, str] | None = None,
        active: str | None = None,
    ) -> GraphData:
        notes = []
        for note_id in note_ids:
            folder, _, name = note_id.rpartition("/")
            notes.append(NoteMeta(id=note_id, title=name, path=folder))
        explicit = [
            ExplicitReference(source=source, target=target)
            for source, targets in (references or {}).items()
            for target in targets
        ]
        return graph_builder.build(notes, explicit, contents or {}, active)

    return _build


@pytest.fixture
def make_graph() -> Callable[..., GraphData]:
    """Hand-build a snapshot from node ids and (source, target) pairs."""

    def _make(node_ids: list[str], edges: list[tuple[str, str]]) -> GraphData:
        return GraphData(
            nodes=[GraphNode(id=node_id, title=node_id) for node_id in node_ids],
            links=[GraphLink(source=source, target=target) for source, target in edges],
        )

    return _make


@pytest.fixture
def log_records() -> Generator[list[dict[str, Any]], None, None]:
    """Capture loguru records emitted during a test."""
    records: list[dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def vault_directory(tmp_path: Path) -> Path:
    """Create a small vault with notes, source files and ignored folders."""
    vault = tmp_path / "vault"
    (vault / "inbox").mkdir(parents=True)
    (vault / "projects").mkdir()
    (vault / "archive").mkdir()
    (vault / "node_modules" / "pkg").mkdir(parents=True)
    (vault / ".obsidian").mkdir()

    (vault / "inbox" / "Idea.md").write_text(
        "---\ntags: [idea, draft]\n---\nSee [[Project Plan]] for details. #inbox\n"
    )
    (vault / "projects" / "Project Plan.md").write_text(
        "# Plan\n\nBack to [[Idea]] and [[Missing Note]]. #planning\n"
    )
    (vault / "projects" / "app.py").write_text("from projects.db import connect\n")
    (vault / "projects" / "db.py").write_text("import os\n")
    (vault / "archive" / "Old.md").write_text("Nothing links here.\n")
    (vault / "node_modules" / "pkg" / "index.js").write_text("require('db')\n")
    (vault / ".obsidian" / "config.json").write_text("{}")
    (vault / "image.png").write_bytes(b"not a note")

    return vault


@pytest.fixture
def vault_loader(vault_directory: Path) -> VaultLoader:
    return VaultLoader(vault_directory)


@pytest.fixture
def orchestrator(vault_loader: VaultLoader) -> GraphOrchestrator:
    return GraphOrchestrator(loader=vault_loader)


@pytest.fixture
def test_client(orchestrator: GraphOrchestrator) -> TestClient:
    """Create test client serving the sample vault."""
    app = create_app(orchestrator=orchestrator)
    return TestClient(app)
