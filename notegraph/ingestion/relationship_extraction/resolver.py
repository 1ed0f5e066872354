"""Reference resolution for converting free-text targets to graph nodes."""

import re
from typing import Callable, Iterable

from loguru import logger

from notegraph.domain.graph import GraphNode

EXTENSION_PATTERN = re.compile(r"\.[^/.]+$")
MD_EXTENSION_PATTERN = re.compile(r"\.md$")


def node_basename(node_id: str) -> str:
    """Lowercased file name of an id without its final extension ("a/Conn.php" -> "conn")."""
    name = node_id.replace("\\", "/").split("/")[-1]
    return EXTENSION_PATTERN.sub("", name).lower()


class ReferenceResolver:
    """Resolves reference targets against the nodes of one graph build.

    The indices are built once in the constructor. A resolver is meant to live for a
    single build and be discarded with it.
    """

    def __init__(self, nodes: Iterable[GraphNode]):
        """Initialize resolver indices.

        Args:
            nodes: Nodes to resolve against. On lowercased key collisions the first node wins.
        """
        self.by_id: dict[str, GraphNode] = {}
        self.by_id_lower: dict[str, GraphNode] = {}
        self.by_title: dict[str, GraphNode] = {}
        self.by_title_lower: dict[str, GraphNode] = {}
        self.by_basename: dict[str, GraphNode] = {}

        for node in nodes:
            self.by_id.setdefault(node.id, node)
            self.by_id_lower.setdefault(node.id.lower(), node)
            if node.title:
                self.by_title.setdefault(node.title, node)
                self.by_title_lower.setdefault(node.title.lower(), node)
            basename = node_basename(node.id)
            if basename:
                self.by_basename.setdefault(basename, node)

        # Ordered by precision, first hit wins
        self._strategies: list[tuple[str, Callable[[str], GraphNode | None]]] = [
            ("exact id", lambda target: self.by_id.get(target)),
            ("lowercased id", lambda target: self.by_id_lower.get(target.lower())),
            ("exact title", lambda target: self.by_title.get(target)),
            ("lowercased title", lambda target: self.by_title_lower.get(target.lower())),
            (
                "id without .md",
                lambda target: self.by_id_lower.get(MD_EXTENSION_PATTERN.sub("", target.lower())),
            ),
            ("basename", lambda target: self.by_basename.get(target.lower())),
        ]

    def resolve(self, target: str) -> GraphNode | None:
        """Resolve a single reference target to the best-matching node.

        Args:
            target: Free-text target taken from a reference

        Returns:
            The matched node, or None when no strategy matches
        """
        for strategy_name, strategy in self._strategies:
            node = strategy(target)
            if node is not None:
                logger.debug(f"Resolved {target!r} -> {node.id} by {strategy_name}")
                return node

        logger.debug(f"Could not resolve reference: {target!r}")
        return None
