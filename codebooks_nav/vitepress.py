"""Export navigation maps in the shapes VitePress expects.

VitePress reads ``themeConfig.sidebar`` as a mapping of route prefix to a list
of ``{text, link}`` / ``{text, collapsed, items}`` entries and
``themeConfig.nav`` as a list of links and dropdowns. This module converts a
:class:`~codebooks_nav.navigation.NavigationResult` into those structures and
writes them next to the site config, both as JSON and as an ES module the
VitePress ``config.js`` can import directly.

Example
-------
>>> from codebooks_nav.vitepress import resolve_link
>>> resolve_link("/reactive/", "core/effect.md")
'/reactive/core/effect'
>>> resolve_link("/reactive/", "https://vuejs.org/")
'https://vuejs.org/'
"""

from __future__ import annotations

import json
import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ._constants import (
    MODULE_FILENAME,
    NAV_FILENAME,
    NAVIGATION_FILENAME,
    SIDEBAR_FILENAME,
)
from .outline import NavGroup, NavLink

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import BookDescriptor, NavMenuConfig, SidebarOptions, SiteConfig
    from .navigation import NavigationResult
    from .outline import NavNode

EXTERNAL_LINK_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


def resolve_link(root_path: str, href: str) -> str:
    """Return the site URL for a TOC link relative to ``root_path``.

    External links (anything with a URL scheme) and in-page anchors are
    returned unchanged. Otherwise a leading ``/`` and a trailing ``.md`` are
    removed and the remainder is appended to the book root.
    """
    if EXTERNAL_LINK_PATTERN.match(href) or href.startswith("#"):
        return href
    relative = href.lstrip("/")
    relative = re.sub(r"\.md(?=(#|$))", "", relative)
    prefix = root_path if root_path.endswith("/") else f"{root_path}/"
    return f"{prefix}{relative}"


def _convert_node(
    node: NavNode, root_path: str, options: SidebarOptions
) -> dict[str, typ.Any]:
    if isinstance(node, NavLink):
        return {"text": node.label, "link": resolve_link(root_path, node.href)}
    return {
        "text": node.label,
        "collapsed": options.collapsed,
        "items": [_convert_node(child, root_path, options) for child in node.children],
    }


def to_sidebar(
    book: BookDescriptor, tree: NavGroup, options: SidebarOptions
) -> list[dict[str, typ.Any]]:
    """Return the VitePress sidebar entries for one book.

    The first entry is an intro group titled with the book's name that links
    to the book landing page and its table of contents; the compiled outline
    follows in source order.
    """
    intro = {
        "text": book.title,
        "items": [
            {"text": options.intro_label, "link": book.root_path},
            {
                "text": options.toc_label,
                "link": resolve_link(book.root_path, options.toc_link),
            },
        ],
    }
    return [intro] + [
        _convert_node(child, book.root_path, options) for child in tree.children
    ]


def build_sidebar_map(
    result: NavigationResult, options: SidebarOptions
) -> dict[str, list[dict[str, typ.Any]]]:
    """Return the ``themeConfig.sidebar`` mapping for every compiled book.

    The intro group comes from the book whose tree occupies each root path,
    so a later duplicate that failed to load never relabels an earlier tree.
    """
    return {
        root_path: to_sidebar(result.owners[root_path], tree, options)
        for root_path, tree in result.navigation.items()
    }


def build_nav_menu(
    books: cabc.Sequence[BookDescriptor], nav: NavMenuConfig
) -> list[dict[str, typ.Any]]:
    """Return ``themeConfig.nav`` with one dropdown per book group.

    Groups appear in the order their first book is declared; books keep
    their declaration order inside each dropdown. A root path declared twice
    is listed once, using the later declaration.
    """
    owners = {book.root_path: book for book in books}
    groups: dict[str, list[dict[str, str]]] = {}
    for book in owners.values():
        groups.setdefault(book.group, []).append(
            {"text": book.title, "link": book.root_path}
        )
    menu: list[dict[str, typ.Any]] = [
        {"text": link.text, "link": link.link} for link in nav.leading
    ]
    menu.extend(
        {"text": nav.group_labels.get(group, group), "items": items}
        for group, items in groups.items()
    )
    menu.extend({"text": link.text, "link": link.link} for link in nav.trailing)
    return menu


class SidebarExporter:
    """Write navigation artefacts for the VitePress site config."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the exporter.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed configuration providing books, sidebar options and nav
            layout.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            package ``templates`` directory when ``None``.
        output_dir : Path, optional
            Override for ``site_config.output_dir``.
        """
        self.site_config = site_config
        self.output_dir = output_dir or site_config.output_dir
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,  # noqa: S701 - renders JavaScript, not HTML
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["tojson_pretty"] = _to_json
        self.template = self.env.get_template("sidebar_module.jinja")

    def write(self, result: NavigationResult) -> list[Path]:
        """Render every artefact for ``result`` and return the written paths."""
        books = self.site_config.books
        sidebar = build_sidebar_map(result, self.site_config.sidebar)
        nav = build_nav_menu(books, self.site_config.nav)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        payloads = {
            NAVIGATION_FILENAME: result.navigation.to_dict(),
            SIDEBAR_FILENAME: sidebar,
            NAV_FILENAME: nav,
        }
        written: list[Path] = []
        for filename, payload in payloads.items():
            path = self.output_dir / filename
            path.write_text(_to_json(payload) + "\n", encoding="utf-8")
            written.append(path)

        module_path = self.output_dir / MODULE_FILENAME
        module_path.write_text(
            self.template.render(
                sidebar=sidebar,
                nav=nav,
                failed=[failure.book.name for failure in result.failures],
            ),
            encoding="utf-8",
        )
        written.append(module_path)
        return written


def _to_json(payload: object) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


__all__ = [
    "SidebarExporter",
    "build_nav_menu",
    "build_sidebar_map",
    "resolve_link",
    "to_sidebar",
]
