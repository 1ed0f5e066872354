"""Test suite for folder resolution."""

from typing import Any

import pytest

from notegraph.domain.note import NoteMeta
from notegraph.query.folders import resolve_folder


@pytest.fixture
def notes() -> list[NoteMeta]:
    return [
        NoteMeta(id="Projects", title="Projects", path="", type="folder"),
        NoteMeta(id="Projects/Web", title="Web", path="Projects", type="folder"),
        NoteMeta(id="Archive/Web", title="Web", path="Archive", type="folder"),
        NoteMeta(id="Archive", title="Archive", path="", type="folder"),
        NoteMeta(id="Projects/Web.md", title="Web.md", path="Projects"),
    ]


def test_exact_path_match(notes: list[NoteMeta]) -> None:
    """Test that an exact folder path resolves directly."""
    assert resolve_folder(notes, "Archive/Web") == "Archive/Web"
    assert resolve_folder(notes, "  Projects  ") == "Projects"


def test_case_insensitive_match(notes: list[NoteMeta]) -> None:
    """Test matching folder names and paths ignoring case."""
    assert resolve_folder(notes, "archive") == "Archive"
    assert resolve_folder(notes, "projects/web") == "Projects/Web"


def test_ambiguous_name_uses_first_match(
    notes: list[NoteMeta], log_records: list[dict[str, Any]]
) -> None:
    """Test that a name shared by several folders resolves to the first and warns."""
    assert resolve_folder(notes, "web") == "Projects/Web"

    warnings = [record for record in log_records if record["level"].name == "WARNING"]
    assert len(warnings) == 1
    assert "Ambiguous folder name" in warnings[0]["message"]


def test_notes_are_not_folders(notes: list[NoteMeta]) -> None:
    """Test that note entries never resolve as folders."""
    assert resolve_folder(notes, "Web.md") is None
    assert resolve_folder(notes, "Projects/Web.md") is None


def test_no_match(notes: list[NoteMeta]) -> None:
    """Test unknown and empty queries."""
    assert resolve_folder(notes, "Nowhere") is None
    assert resolve_folder(notes, "") is None
    assert resolve_folder(notes, "   ") is None
    assert resolve_folder([], "Projects") is None
