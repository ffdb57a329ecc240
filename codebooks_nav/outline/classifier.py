r"""Classify individual lines of a book's ``toc.md`` outline.

Book outlines use a deliberately small Markdown dialect: ``###`` section
headings, ``####`` subsection headings, numbered item links, bullet links for
front matter such as a preface, and ``---`` rules. Everything else is prose
kept for human readers and ignored here.

Example
-------
>>> from codebooks_nav.outline.classifier import LineKind, classify
>>> line = classify("3. [Scheduler](core/scheduler.md)")
>>> line.kind is LineKind.ITEM, line.label, line.link
(True, 'Scheduler', 'core/scheduler.md')
>>> classify("#### 2.1 Effects").kind
<LineKind.SUBSECTION: 'subsection'>
"""

from __future__ import annotations

import dataclasses as dc
import enum
import re
import typing as typ

SUBSECTION_PATTERN = re.compile(r"^####(?!#)\s+(\S.*)$")
SECTION_PATTERN = re.compile(r"^###(?!#)\s+(\S.*)$")
# Link targets may contain one level of balanced parentheses.
LINK_TARGET = r"\(((?:[^()]|\([^()]*\))+?)\)"
ITEM_PATTERN = re.compile(r"^\d+\.\s+\[(.+?)\]" + LINK_TARGET)
PREFACE_PATTERN = re.compile(r"^-\s+\[(.+?)\]" + LINK_TARGET)
DIVIDER_PATTERN = re.compile(r"^-{3,}\s*$")

# Prefixes that announce a link line; used to flag lines that start like a
# link but never close their brackets.
ITEM_PREFIX = re.compile(r"^\d+\.\s+\[")
PREFACE_PREFIX = re.compile(r"^-\s+\[")


class LineKind(enum.Enum):
    """Structural role of a single outline line."""

    PREFACE = "preface"
    DIVIDER = "divider"
    SECTION = "section"
    SUBSECTION = "subsection"
    ITEM = "item"
    IGNORE = "ignore"


@dc.dataclass(slots=True, frozen=True)
class ClassifiedLine:
    """Result of classifying one line.

    Attributes
    ----------
    kind : LineKind
        Structural role of the line.
    label : str | None
        Heading text or link label; ``None`` for dividers and ignored lines.
    link : str | None
        Link target for items and preface links.
    malformed : bool
        ``True`` when the line looked like a link but could not be parsed.
    lineno : int
        1-based position in the source document (``0`` when unknown).
    """

    kind: LineKind
    label: str | None = None
    link: str | None = None
    malformed: bool = False
    lineno: int = 0


def _link_line(kind: LineKind, match: re.Match[str], lineno: int) -> ClassifiedLine:
    label = match.group(1).strip()
    link = match.group(2).strip()
    if not label or not link:
        return ClassifiedLine(LineKind.IGNORE, malformed=True, lineno=lineno)
    return ClassifiedLine(kind, label=label, link=link, lineno=lineno)


def classify(line: str, *, lineno: int = 0) -> ClassifiedLine:
    """Return the structural classification of ``line``.

    Parameters
    ----------
    line : str
        A single line of outline text, with or without its line terminator.
    lineno : int, optional
        1-based line number recorded on the result for diagnostics.

    Returns
    -------
    ClassifiedLine
        The classification. Unrecognised and malformed input yields
        ``LineKind.IGNORE``; this function never raises for text input.

    Notes
    -----
    Patterns are tried from most to least specific: subsection, section,
    item, preface, divider. Heading patterns are anchored to an exact count
    of ``#`` so a ``####`` line never matches the section rule.
    """
    text = line.rstrip()

    if match := SUBSECTION_PATTERN.match(text):
        return ClassifiedLine(
            LineKind.SUBSECTION, label=match.group(1).strip(), lineno=lineno
        )
    if match := SECTION_PATTERN.match(text):
        return ClassifiedLine(
            LineKind.SECTION, label=match.group(1).strip(), lineno=lineno
        )
    if match := ITEM_PATTERN.match(text):
        return _link_line(LineKind.ITEM, match, lineno)
    if match := PREFACE_PATTERN.match(text):
        return _link_line(LineKind.PREFACE, match, lineno)
    if DIVIDER_PATTERN.match(text):
        return ClassifiedLine(LineKind.DIVIDER, lineno=lineno)

    malformed = bool(ITEM_PREFIX.match(text) or PREFACE_PREFIX.match(text))
    return ClassifiedLine(LineKind.IGNORE, malformed=malformed, lineno=lineno)


def classify_lines(document: str) -> typ.Iterator[ClassifiedLine]:
    """Yield a classification for every line of ``document`` in order."""
    for lineno, line in enumerate(document.splitlines(), start=1):
        yield classify(line, lineno=lineno)


__all__ = [
    "ClassifiedLine",
    "LineKind",
    "classify",
    "classify_lines",
]
