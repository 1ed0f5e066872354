"""Convention-based detection of structural references between notes.

Each scanner looks for one source-file convention (imports, includes, instantiations) and
returns raw candidate strings. Nothing here parses a language: scanners will miss some
relationships and over-match others, and candidates only become edges once the
ReferenceResolver maps them to a node.
"""

import re
from typing import Callable, List, Sequence

from .resolver import EXTENSION_PATTERN

Scanner = Callable[[str], List[str]]

MODULE_IMPORT_PATTERN = re.compile(
    r"(?:import\s+.*?from\s+['\"]([^'\"]+)['\"])|(?:require\(['\"]([^'\"]+)['\"]\))"
)
INCLUDE_PATTERN = re.compile(
    r"(?:include|include_once|require|require_once)\s*(?:\(?\s*['\"]([^'\"]+)['\"]\s*\)?)"
)
DOTTED_IMPORT_PATTERN = re.compile(
    r"(?:from\s+([a-zA-Z0-9_.]+)\s+import)|(?:import\s+([a-zA-Z0-9_.]+))"
)
BRACKET_INCLUDE_PATTERN = re.compile(r"#include\s*[\"<]([^\">]+)[\">]")
RELATIVE_REQUIRE_PATTERN = re.compile(r"(?:require|require_relative)\s*['\"]([^'\"]+)['\"]")
TYPE_INSTANTIATION_PATTERN = re.compile(r"\bnew\s+([A-Z][a-zA-Z0-9_]*)")


def path_stem(path: str) -> str:
    """Last path segment without its extension ("../lib/db.php" -> "db")."""
    return EXTENSION_PATTERN.sub("", path.split("/")[-1])


def _path_candidates(pattern: re.Pattern[str], content: str) -> List[str]:
    candidates = []
    for match in pattern.finditer(content):
        path = next((group for group in match.groups() if group), None)
        if not path:
            continue
        stem = path_stem(path)
        if stem:
            candidates.append(stem)
    return candidates


def scan_module_imports(content: str) -> List[str]:
    """import x from "./x", require("x")"""
    return _path_candidates(MODULE_IMPORT_PATTERN, content)


def scan_includes(content: str) -> List[str]:
    """include 'x.php', require_once("lib/x.php")"""
    return _path_candidates(INCLUDE_PATTERN, content)


def scan_dotted_imports(content: str) -> List[str]:
    """from pkg.utils import x, import pkg.utils"""
    candidates = []
    for match in DOTTED_IMPORT_PATTERN.finditer(content):
        module_name = match.group(1) or match.group(2)
        if not module_name:
            continue
        last_segment = module_name.split(".")[-1]
        if last_segment:
            candidates.append(last_segment)
    return candidates


def scan_bracket_includes(content: str) -> List[str]:
    """#include "x.h", #include <x.h>"""
    return _path_candidates(BRACKET_INCLUDE_PATTERN, content)


def scan_relative_requires(content: str) -> List[str]:
    """require 'x', require_relative 'lib/x'"""
    return _path_candidates(RELATIVE_REQUIRE_PATTERN, content)


def scan_type_instantiations(content: str) -> List[str]:
    """new ClassName(...)"""
    return TYPE_INSTANTIATION_PATTERN.findall(content)


DEFAULT_SCANNERS: tuple[tuple[str, Scanner], ...] = (
    ("module import", scan_module_imports),
    ("include", scan_includes),
    ("dotted import", scan_dotted_imports),
    ("bracket include", scan_bracket_includes),
    ("relative require", scan_relative_requires),
    ("type instantiation", scan_type_instantiations),
)


class CrossReferenceDetector:
    """Runs every convention scanner over a note and collects candidate targets."""

    def __init__(self, scanners: Sequence[tuple[str, Scanner]] = DEFAULT_SCANNERS):
        self.scanners = list(scanners)

    def detect(self, content: str) -> List[str]:
        """Collect raw candidate targets from all scanners, in scanner order.

        Args:
            content: Raw note text, possibly empty

        Returns:
            Candidate target strings, not yet resolved. May contain duplicates.
        """
        if not content:
            return []

        candidates: list[str] = []
        for _, scanner in self.scanners:
            candidates.extend(scanner(content))
        return candidates
