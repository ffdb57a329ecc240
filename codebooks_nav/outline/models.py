"""Navigation tree nodes produced by the outline compiler."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(slots=True, frozen=True)
class NavLink:
    """Leaf entry pointing at a single page.

    Attributes
    ----------
    label : str
        Display text taken from the bracketed part of the TOC line.
    href : str
        Link exactly as written in the TOC, relative to the book root.
    """

    label: str
    href: str

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the ``{label, href}`` mapping consumed by renderers."""
        return {"label": self.label, "href": self.href}


@dc.dataclass(slots=True, frozen=True)
class NavGroup:
    """Container node for a book, section, or subsection.

    Attributes
    ----------
    label : str
        Heading text (or the book title for the root group).
    children : list[NavNode]
        Child nodes in source-document order.
    """

    label: str
    children: list[NavNode] = dc.field(default_factory=list)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the ``{label, children}`` mapping consumed by renderers."""
        return {
            "label": self.label,
            "children": [child.to_dict() for child in self.children],
        }

    def iter_links(self) -> typ.Iterator[NavLink]:
        """Yield every link beneath this group, depth first."""
        for child in self.children:
            if isinstance(child, NavGroup):
                yield from child.iter_links()
            else:
                yield child


NavNode: typ.TypeAlias = NavLink | NavGroup


__all__ = ["NavGroup", "NavLink", "NavNode"]
