"""Loading vault entries and note content from disk."""

import os
from pathlib import Path

from loguru import logger

from notegraph.domain.note import NoteMeta
from notegraph.errors import VaultNotFoundError

TEXT_EXTENSIONS = (
    ".md", ".mdx", ".txt", ".js", ".jsx", ".ts", ".tsx", ".py", ".c", ".cpp", ".cs", ".h",
    ".hpp", ".css", ".scss", ".sass", ".less", ".html", ".twig", ".json", ".yaml", ".yml",
    ".sh", ".bash", ".sql", ".rs", ".go", ".java", ".php", ".rb", ".xml", ".toml", ".ini",
    ".csv", ".tsv", ".log", ".ipynb",
)
TEXT_FILENAMES = ("dockerfile", "makefile")
IGNORED_NAMES = (
    "node_modules", ".git", "dist", "build", "out", ".next", ".cache", "vendor", ".idea",
    ".vscode", "storage", "bin", "obj",
)


class VaultLoader:
    """Lists the notes of a vault directory and loads their content."""

    def __init__(
        self,
        root: Path,
        *,
        extensions: tuple[str, ...] = TEXT_EXTENSIONS,
        ignored_names: tuple[str, ...] = IGNORED_NAMES,
        max_content_notes: int = 2000,
    ):
        """
        Initialize VaultLoader.

        Args:
            root: Vault root directory
            extensions: File suffixes treated as notes (lowercase, with the dot)
            ignored_names: Directory names never descended into
            max_content_notes: Maximum number of notes whose content is loaded per build
        """
        self.root = Path(root)
        self.extensions = extensions
        self.ignored_names = {name.lower() for name in ignored_names}
        self.max_content_notes = max_content_notes

    def list_notes(self) -> list[NoteMeta]:
        """List folders and supported files below the vault root.

        Note ids are relative POSIX paths including the extension, titles are file names
        and paths are the relative parent folder ("" at the root).

        Raises:
            VaultNotFoundError: If the root is not an existing directory
        """
        if not self.root.is_dir():
            raise VaultNotFoundError(f"Invalid vault path: {self.root}")

        entries: list[NoteMeta] = []
        for current_dir, dir_names, file_names in os.walk(self.root):
            # Prune hidden and bulky folders in place so os.walk skips them
            dir_names[:] = sorted(
                name
                for name in dir_names
                if not name.startswith(".") and name.lower() not in self.ignored_names
            )
            current = Path(current_dir)
            parent = self._relative_id(current) if current != self.root else ""

            for dir_name in dir_names:
                entries.append(
                    NoteMeta(
                        id=self._relative_id(current / dir_name),
                        title=dir_name,
                        path=parent,
                        type="folder",
                    )
                )

            for file_name in sorted(file_names):
                if not self._is_supported_file(file_name):
                    continue
                entries.append(
                    NoteMeta(
                        id=self._relative_id(current / file_name),
                        title=file_name,
                        path=parent,
                        type="note",
                    )
                )

        logger.debug(f"Listed {len(entries)} entries in {self.root}")
        return entries

    def load_contents(self, notes: list[NoteMeta]) -> dict[str, str]:
        """Read the content of up to max_content_notes notes.

        Notes past the cap or that fail to load are left out; the graph treats them as
        empty text.

        Args:
            notes: Entries as returned by list_notes

        Returns:
            Dictionary mapping note ID to raw text
        """
        to_load = [note for note in notes if note.type != "folder"]
        if len(to_load) > self.max_content_notes:
            logger.info(
                f"Vault has {len(to_load)} notes, loading content for the first "
                f"{self.max_content_notes}"
            )
            to_load = to_load[: self.max_content_notes]

        contents = {}
        for note in to_load:
            file = self.root / note.id
            try:
                contents[note.id] = file.read_text(encoding="utf-8", errors="replace")
            except OSError as e:
                logger.warning(f"Failed to load {file}: {e}")

        return contents

    def _relative_id(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    def _is_supported_file(self, file_name: str) -> bool:
        lower = file_name.lower()
        return lower.endswith(self.extensions) or lower in TEXT_FILENAMES
