"""Note domain models."""

from typing import Literal

from pydantic import BaseModel

ROOT_FOLDER = "root"


class NoteMeta(BaseModel):
    """Metadata for one vault entry, as listed by the host.

    Attributes:
        id: Storage key of the entry (relative POSIX path including extension)
        title: Display name, falls back to the id when missing
        path: Folder location relative to the vault root ("" or None for the root)
        type: Whether the entry is a note or a folder
    """

    id: str
    title: str | None = None
    path: str | None = None
    type: Literal["note", "folder"] = "note"

    @property
    def folder_path(self) -> str:
        """Folder key used for clustering, "root" for notes at the vault root."""
        if not self.path:
            return ROOT_FOLDER
        normalized = self.path.replace("\\", "/").strip("/")
        return normalized or ROOT_FOLDER


class ExplicitReference(BaseModel):
    """A reference written by hand in a note body, e.g. [[Other Note]]."""

    source: str  # note id
    target: str  # free text, resolved during graph build
