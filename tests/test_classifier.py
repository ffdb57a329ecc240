"""Unit tests for the outline line classifier.

These tests pin down the recognition rules for ``toc.md`` lines: heading
levels anchored to an exact number of ``#``, numbered item links, bullet
preface links, dividers, and the graceful handling of malformed link lines.

Usage
-----
Run ``pytest tests/test_classifier.py -v`` or ``make test``.
"""

from __future__ import annotations

import pytest

from codebooks_nav.outline import LineKind, classify, classify_lines


@pytest.mark.parametrize(
    ("line", "kind", "label"),
    [
        ("### 第一部分：设计思想", LineKind.SECTION, "第一部分：设计思想"),
        ("#### 2.1 响应式核心", LineKind.SUBSECTION, "2.1 响应式核心"),
        ("###   Spaced heading   ", LineKind.SECTION, "Spaced heading"),
        ("####\tTabbed", LineKind.SUBSECTION, "Tabbed"),
        ("###\u3000第一部分", LineKind.SECTION, "第一部分"),
        ("####\u30002.1 响应式核心", LineKind.SUBSECTION, "2.1 响应式核心"),
    ],
)
def test_headings_are_trimmed(line: str, kind: LineKind, label: str) -> None:
    """Heading lines classify by level and yield a trimmed label."""
    result = classify(line)
    assert result.kind is kind, f"expected {kind} for {line!r}, got {result.kind}"
    assert result.label == label, f"expected label {label!r}, got {result.label!r}"


@pytest.mark.parametrize(
    "line",
    ["# Book title", "## Chapter", "##### Too deep", "###NoSpace", "### ", "####"],
)
def test_other_heading_levels_are_ignored(line: str) -> None:
    """Only the three- and four-hash levels are significant."""
    assert classify(line).kind is LineKind.IGNORE, (
        f"expected {line!r} to be ignored"
    )


def test_four_hashes_never_read_as_section() -> None:
    """A subsection heading must not match the section rule."""
    result = classify("#### Detail")
    assert result.kind is LineKind.SUBSECTION, (
        f"expected subsection, got {result.kind}"
    )
    assert result.label == "Detail", f"unexpected label {result.label!r}"


def test_item_extracts_label_and_link() -> None:
    """Numbered links yield their bracket label and parenthesised link."""
    result = classify("12. [Some Title](path/to/file.md)")
    assert result.kind is LineKind.ITEM, f"expected item, got {result.kind}"
    assert (result.label, result.link) == ("Some Title", "path/to/file.md")


def test_item_tolerates_trailing_text() -> None:
    """Text after the closing parenthesis does not prevent a match."""
    result = classify("3. [前端路由发展历程](design/routing-history.md) （草稿）")
    assert result.kind is LineKind.ITEM, f"expected item, got {result.kind}"
    assert result.link == "design/routing-history.md"


@pytest.mark.parametrize(
    ("line", "kind"),
    [
        ("1. [A](foo(bar).md)", LineKind.ITEM),
        ("- [A](foo(bar).md)", LineKind.PREFACE),
        ("1. [A](foo(bar).md) (draft)", LineKind.ITEM),
    ],
)
def test_link_targets_keep_balanced_parentheses(line: str, kind: LineKind) -> None:
    """Parentheses nested one level deep stay part of the link target."""
    result = classify(line)
    assert result.kind is kind, f"expected {kind} for {line!r}, got {result.kind}"
    assert result.link == "foo(bar).md", f"unexpected link {result.link!r}"


def test_trailing_parenthetical_is_not_part_of_link() -> None:
    """A parenthetical after the link does not extend the target."""
    result = classify("3. [X](a.md) (draft)")
    assert result.link == "a.md", f"unexpected link {result.link!r}"


def test_bullet_link_is_preface() -> None:
    """Bullet links are front-matter links regardless of their text."""
    result = classify("- [序言](index.md)")
    assert result.kind is LineKind.PREFACE, f"expected preface, got {result.kind}"
    assert (result.label, result.link) == ("序言", "index.md")


@pytest.mark.parametrize("line", ["---", "-----", "---   "])
def test_rules_are_dividers(line: str) -> None:
    """Three or more dashes form a divider with no label."""
    result = classify(line)
    assert result.kind is LineKind.DIVIDER, f"expected divider for {line!r}"
    assert result.label is None, "dividers carry no label"


@pytest.mark.parametrize("line", ["", "   ", "Plain prose.", "--", "* [x](y.md)"])
def test_insignificant_lines_are_ignored(line: str) -> None:
    """Blank lines, prose and unsupported markers contribute nothing."""
    result = classify(line)
    assert result.kind is LineKind.IGNORE, f"expected {line!r} to be ignored"
    assert not result.malformed, f"{line!r} should not be flagged malformed"


@pytest.mark.parametrize(
    "line",
    [
        "4. [Unterminated](missing.md",
        "5. [No link]",
        "6. [](empty-label.md)",
        "- [Broken preface(index.md)",
        "7. [  ](blank.md)",
    ],
)
def test_malformed_links_degrade_to_ignore(line: str) -> None:
    """Link-looking lines that fail extraction are ignored, not raised."""
    result = classify(line)
    assert result.kind is LineKind.IGNORE, f"expected {line!r} to be ignored"
    assert result.malformed, f"expected {line!r} to be flagged malformed"


def test_classify_lines_numbers_lines_and_handles_crlf() -> None:
    """Line numbers are 1-based and CRLF input matches LF input."""
    document = "### Part\r\n\r\n1. [Intro](intro.md)\r\n"
    results = list(classify_lines(document))
    assert [r.kind for r in results] == [
        LineKind.SECTION,
        LineKind.IGNORE,
        LineKind.ITEM,
    ]
    assert [r.lineno for r in results] == [1, 2, 3]
    assert results[2].link == "intro.md", "CR must not leak into the link"
