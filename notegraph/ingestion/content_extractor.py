"""Content extraction service for note text."""

import re
from typing import List

from notegraph.domain.note import ExplicitReference

FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
FRONTMATTER_TAGS_PATTERN = re.compile(r"^[ \t]*tags:[ \t]*\[?(.*?)\]?[ \t]*$", re.MULTILINE)
INLINE_TAG_PATTERN = re.compile(r"(?<!\S)#([A-Za-z][A-Za-z0-9_-]*)")
WIKILINK_PATTERN = re.compile(r"\[\[([^\]|]+)(?:\|[^\]]*)?\]\]")


class ContentExtractor:
    """Service for extracting tags and references from raw note text."""

    @staticmethod
    def extract_tags(content: str) -> List[str]:
        """Extract tags from front-matter and inline #tag markers.

        Front-matter tags come first, then inline tags in order of first occurrence.
        Tags keep the case they were written in, so "Tag" and "tag" are distinct.

        Args:
            content: Raw note text, possibly empty

        Returns:
            List of unique tags
        """
        tags: list[str] = []
        if not content:
            return tags

        frontmatter = FRONTMATTER_PATTERN.match(content)
        if frontmatter:
            tags_line = FRONTMATTER_TAGS_PATTERN.search(frontmatter.group(1))
            if tags_line:
                for entry in tags_line.group(1).split(","):
                    tag = entry.strip().strip("'\"").strip()
                    if tag and tag not in tags:
                        tags.append(tag)

        for match in INLINE_TAG_PATTERN.finditer(content):
            tag = match.group(1)
            if tag not in tags:
                tags.append(tag)

        return tags

    @staticmethod
    def extract_wikilinks(content: str) -> List[str]:
        """Extract wikilink targets from note text.

        Extracts links in the form of [[link name]] or [[link name|display text]].

        Args:
            content: Raw note text

        Returns:
            List of unique wikilink targets in order of first occurrence
        """
        targets: list[str] = []
        for raw_target in WIKILINK_PATTERN.findall(content or ""):
            target = raw_target.strip()
            if target and target not in targets:
                targets.append(target)
        return targets

    def extract_references(self, note_id: str, content: str) -> List[ExplicitReference]:
        """Turn the wikilinks of one note into explicit references."""
        return [
            ExplicitReference(source=note_id, target=target)
            for target in self.extract_wikilinks(content)
        ]
