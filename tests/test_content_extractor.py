"""Test suite for tag and wikilink extraction."""

from notegraph.ingestion.content_extractor import ContentExtractor


def test_frontmatter_bracketed_tags() -> None:
    """Test bracketed front-matter tag lists."""
    content = "---\ntitle: Plan\ntags: [alpha, 'beta', \"gamma\"]\n---\nBody text"

    assert ContentExtractor.extract_tags(content) == ["alpha", "beta", "gamma"]


def test_frontmatter_bare_tags() -> None:
    """Test bare comma-separated front-matter tags."""
    content = "---\ntags: alpha,  beta ,gamma\n---\n"

    assert ContentExtractor.extract_tags(content) == ["alpha", "beta", "gamma"]


def test_frontmatter_indented_tags() -> None:
    """Test a tags key indented inside the front-matter block."""
    content = "---\nmeta:\n  tags: [nested, 'quoted']\n---\nBody"

    assert ContentExtractor.extract_tags(content) == ["nested", "quoted"]


def test_inline_tags_in_first_occurrence_order() -> None:
    """Test inline tags keep first occurrence order and drop repeats."""
    content = "#first some text #second-tag and #first again\n#third_tag"

    assert ContentExtractor.extract_tags(content) == ["first", "second-tag", "third_tag"]


def test_frontmatter_tags_come_before_inline_tags() -> None:
    """Test that front-matter tags are listed first and not duplicated inline."""
    content = "---\ntags: [project]\n---\nWorking on #project and #review"

    assert ContentExtractor.extract_tags(content) == ["project", "review"]


def test_tags_are_case_sensitive() -> None:
    """Test that tags differing only by case are distinct."""
    content = "#Tag and #tag"

    assert ContentExtractor.extract_tags(content) == ["Tag", "tag"]


def test_inline_tag_patterns() -> None:
    """Test which inline markers count as tags."""
    test_cases = [
        ("# Heading", []),
        ("#123 numbers first", []),
        ("issue#42 and email#foo", []),
        ("(#paren) is not preceded by whitespace", []),
        ("#a1-b_2 ok", ["a1-b_2"]),
        ("line one\n#next-line", ["next-line"]),
    ]

    for content, expected in test_cases:
        assert ContentExtractor.extract_tags(content) == expected, content


def test_missing_or_malformed_frontmatter() -> None:
    """Test that broken front-matter never raises and yields no front-matter tags."""
    assert ContentExtractor.extract_tags("") == []
    assert ContentExtractor.extract_tags("---\ntags: [open, block]\nno closing marker") == []
    assert ContentExtractor.extract_tags("text first\n---\ntags: [late]\n---\n") == []
    assert ContentExtractor.extract_tags("---\ntags:\n---\n") == []
    assert ContentExtractor.extract_tags("---\ntags: [ , '' ]\n---\n") == []


def test_frontmatter_with_windows_line_endings() -> None:
    """Test front-matter delimited with CRLF line endings."""
    content = "---\r\ntags: [windows]\r\n---\r\nBody"

    assert ContentExtractor.extract_tags(content) == ["windows"]


def test_wikilink_patterns() -> None:
    """Test various wikilink patterns."""
    test_cases = [
        ("[[Simple Link]]", ["Simple Link"]),
        ("[[Link|Display Text]]", ["Link"]),
        ("Multiple [[Link1]] and [[Link2]]", ["Link1", "Link2"]),
        ("Repeated [[Link]] and [[Link|again]]", ["Link"]),
        ("Padded [[  spaced  ]]", ["spaced"]),
        ("No links here", []),
    ]

    for content, expected in test_cases:
        assert ContentExtractor.extract_wikilinks(content) == expected


def test_extract_references() -> None:
    """Test turning wikilinks into explicit references."""
    references = ContentExtractor().extract_references("a.md", "Go to [[B]] and [[C|see C]]")

    assert [(r.source, r.target) for r in references] == [("a.md", "B"), ("a.md", "C")]
