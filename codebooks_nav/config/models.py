"""Typed dataclasses describing the book collection configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class BookDescriptor:
    """Identify one book module within the collection.

    Attributes
    ----------
    name : str
        Unique slug; also the book's directory name under ``docs_dir``.
    root_path : str
        URL prefix the book is served from, for example ``/router/``.
    title : str
        Display label used for the sidebar root and the top menu.
    group : str
        Category used to bucket books into top navigation dropdowns.
    """

    name: str
    root_path: str
    title: str
    group: str


@dc.dataclass(slots=True)
class NavLinkConfig:
    """Fixed link placed in the top navigation bar."""

    text: str
    link: str


@dc.dataclass(slots=True)
class NavMenuConfig:
    """Top navigation layout around the generated group dropdowns."""

    leading: list[NavLinkConfig] = dc.field(default_factory=list)
    trailing: list[NavLinkConfig] = dc.field(default_factory=list)
    group_labels: dict[str, str] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class SidebarOptions:
    """Presentation options applied when exporting sidebars."""

    intro_label: str = "书籍介绍"
    toc_label: str = "目录"
    toc_link: str = "book_zh/toc"
    collapsed: bool = True


@dc.dataclass(slots=True)
class SiteConfig:
    """Book descriptors alongside shared build settings."""

    books: list[BookDescriptor]
    docs_dir: Path = Path("docs")
    toc_path: str = "book_zh/toc.md"
    source_base_url: str | None = None
    output_dir: Path = Path("docs/.vitepress/generated")
    sidebar: SidebarOptions = dc.field(default_factory=SidebarOptions)
    nav: NavMenuConfig = dc.field(default_factory=NavMenuConfig)

    def get_book(self, name: str) -> BookDescriptor:
        """Return the last book registered under ``name``."""
        for book in reversed(self.books):
            if book.name == name:
                return book
        available = ", ".join(sorted({book.name for book in self.books}))
        msg = f"Unknown book '{name}'. Known books: {available}"
        raise KeyError(msg)


__all__ = [
    "BookDescriptor",
    "NavLinkConfig",
    "NavMenuConfig",
    "SidebarOptions",
    "SiteConfig",
    "SiteConfigError",
]
