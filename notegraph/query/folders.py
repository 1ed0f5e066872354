"""Folder lookup by free-text query."""

from typing import Iterable

from loguru import logger

from notegraph.domain.note import NoteMeta


def resolve_folder(notes: Iterable[NoteMeta], query: str) -> str | None:
    """Resolve a folder query to a folder path.

    Priority:
    1. Exact folder path (id) match
    2. Folder whose name or path equals the query, ignoring case

    When several folders match by name, the first one in notes order wins and a
    warning is logged.

    Args:
        notes: Vault entries, folders included
        query: Folder name or path as typed by the user

    Returns:
        The folder's full path, or None when nothing matches
    """
    if not query or not query.strip():
        return None

    q = query.strip()
    q_lower = q.lower()
    folders = [note for note in notes if note.type == "folder"]

    for folder in folders:
        if folder.id == q:
            return folder.id

    matches = [
        folder
        for folder in folders
        if folder.id.lower() == q_lower or (folder.title or "").lower() == q_lower
    ]

    if not matches:
        return None
    if len(matches) > 1:
        logger.warning(
            f"Ambiguous folder name {query!r}: found {len(matches)} matches. "
            f"Using first one: {matches[0].id}"
        )
    return matches[0].id
