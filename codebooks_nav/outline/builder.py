r"""Fold classified outline lines into a navigation tree.

The builder is an explicit accumulator: each :class:`ClassifiedLine` is fed
in document order and the builder tracks the currently open section and
subsection. Items always attach to the most specific container that is open.

Example
-------
>>> from codebooks_nav.outline.builder import parse_outline
>>> tree = parse_outline("### Part 1\n1. [Intro](intro.md)\n", title="Book")
>>> tree.children[0].label, tree.children[0].children[0].href
('Part 1', 'intro.md')
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .classifier import ClassifiedLine, LineKind, classify_lines
from .models import NavGroup, NavLink

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(slots=True)
class BookOutline:
    """Compiled tree for one outline document plus its diagnostics.

    Attributes
    ----------
    tree : NavGroup
        Root group labelled with the book title.
    malformed_lines : list[int]
        1-based line numbers that looked like links but could not be parsed.
    """

    tree: NavGroup
    malformed_lines: list[int] = dc.field(default_factory=list)


class OutlineBuilder:
    """Accumulate classified lines into a single root :class:`NavGroup`."""

    def __init__(self, title: str) -> None:
        self.root = NavGroup(title)
        self.current_section: NavGroup | None = None
        self.current_subsection: NavGroup | None = None
        self.malformed_lines: list[int] = []

    def feed(self, line: ClassifiedLine) -> OutlineBuilder:
        """Apply one classified line to the tree and return the builder."""
        match line.kind:
            case LineKind.PREFACE:
                self.root.children.append(_link(line))
            case LineKind.SECTION:
                section = NavGroup(line.label or "")
                self.root.children.append(section)
                self.current_section = section
                self.current_subsection = None
            case LineKind.SUBSECTION:
                subsection = NavGroup(line.label or "")
                parent = self.current_section or self.root
                parent.children.append(subsection)
                self.current_subsection = subsection
            case LineKind.ITEM:
                container = self.current_subsection or self.current_section or self.root
                container.children.append(_link(line))
            case _:
                if line.malformed:
                    self.malformed_lines.append(line.lineno)
        return self

    def build(self) -> BookOutline:
        """Return the compiled outline; the builder should not be fed afterwards."""
        return BookOutline(tree=self.root, malformed_lines=list(self.malformed_lines))


def _link(line: ClassifiedLine) -> NavLink:
    return NavLink(label=line.label or "", href=line.link or "")


def build_tree(events: cabc.Iterable[ClassifiedLine], *, title: str) -> BookOutline:
    """Fold ``events`` into a :class:`BookOutline` rooted at ``title``.

    Parameters
    ----------
    events : Iterable[ClassifiedLine]
        Classified lines in document order.
    title : str
        Label applied to the root group (the book title).

    Returns
    -------
    BookOutline
        The compiled tree. Items seen before any heading attach to the root,
        so no item is ever dropped.
    """
    builder = OutlineBuilder(title)
    for event in events:
        builder.feed(event)
    return builder.build()


def compile_outline(document: str, *, title: str) -> BookOutline:
    """Classify and fold ``document`` into a :class:`BookOutline`."""
    return build_tree(classify_lines(document), title=title)


def parse_outline(document: str, *, title: str) -> NavGroup:
    """Return only the navigation tree for ``document``."""
    return compile_outline(document, title=title).tree


__all__ = [
    "BookOutline",
    "OutlineBuilder",
    "build_tree",
    "compile_outline",
    "parse_outline",
]
