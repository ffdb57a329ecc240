"""Unit tests for the VitePress sidebar and nav export."""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json
import pytest

from codebooks_nav._constants import (
    MODULE_FILENAME,
    NAV_FILENAME,
    NAVIGATION_FILENAME,
    SIDEBAR_FILENAME,
)
from codebooks_nav.config import (
    BookDescriptor,
    NavLinkConfig,
    NavMenuConfig,
    SidebarOptions,
    SiteConfig,
)
from codebooks_nav.content_store import MappingContentStore
from codebooks_nav.navigation import build_navigation
from codebooks_nav.outline import NavGroup, NavLink
from codebooks_nav.vitepress import (
    SidebarExporter,
    build_nav_menu,
    build_sidebar_map,
    resolve_link,
    to_sidebar,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

REACTIVE = BookDescriptor("reactive", "/reactive/", "Vue3 响应式系统", "源码解析")
ROUTER = BookDescriptor("router", "/router/", "Vue Router 路由", "源码解析")
MINI = BookDescriptor("reactive-mini", "/reactive-mini/", "Mini 响应式系统", "Mini 实现")


@pytest.mark.parametrize(
    ("href", "expected"),
    [
        ("core/effect.md", "/reactive/core/effect"),
        ("/core/effect.md", "/reactive/core/effect"),
        ("core/effect.md#track", "/reactive/core/effect#track"),
        ("core/readme.mdx", "/reactive/core/readme.mdx"),
        ("index.md", "/reactive/index"),
        ("https://vuejs.org/guide.md", "https://vuejs.org/guide.md"),
        ("#anchor", "#anchor"),
    ],
)
def test_resolve_link(href: str, expected: str) -> None:
    """TOC links become site URLs under the book root."""
    assert resolve_link("/reactive/", href) == expected


def test_resolve_link_adds_missing_trailing_slash() -> None:
    """Root paths without a trailing slash are joined correctly."""
    assert resolve_link("/reactive", "a.md") == "/reactive/a"


def test_to_sidebar_prepends_intro_group() -> None:
    """Each sidebar starts with links to the book landing page and TOC."""
    tree = NavGroup(
        REACTIVE.title,
        [
            NavLink("序言", "index.md"),
            NavGroup("第一部分", [NavLink("effect", "core/effect.md")]),
        ],
    )
    sidebar = to_sidebar(REACTIVE, tree, SidebarOptions())
    assert sidebar == [
        {
            "text": "Vue3 响应式系统",
            "items": [
                {"text": "书籍介绍", "link": "/reactive/"},
                {"text": "目录", "link": "/reactive/book_zh/toc"},
            ],
        },
        {"text": "序言", "link": "/reactive/index"},
        {
            "text": "第一部分",
            "collapsed": True,
            "items": [{"text": "effect", "link": "/reactive/core/effect"}],
        },
    ]


def test_to_sidebar_respects_collapsed_option() -> None:
    """Groups use the configured collapsed flag."""
    tree = NavGroup("T", [NavGroup("Part")])
    sidebar = to_sidebar(REACTIVE, tree, SidebarOptions(collapsed=False))
    assert sidebar[1] == {"text": "Part", "collapsed": False, "items": []}


def test_nav_menu_groups_books_in_declaration_order() -> None:
    """Dropdowns follow first appearance of each group, between fixed links."""
    nav = NavMenuConfig(
        leading=[NavLinkConfig("首页", "/")],
        trailing=[NavLinkConfig("学习路径", "/learning-paths")],
        group_labels={"源码解析": "源码解析书籍"},
    )
    menu = build_nav_menu([REACTIVE, MINI, ROUTER], nav)
    assert menu == [
        {"text": "首页", "link": "/"},
        {
            "text": "源码解析书籍",
            "items": [
                {"text": "Vue3 响应式系统", "link": "/reactive/"},
                {"text": "Vue Router 路由", "link": "/router/"},
            ],
        },
        {
            "text": "Mini 实现",
            "items": [{"text": "Mini 响应式系统", "link": "/reactive-mini/"}],
        },
        {"text": "学习路径", "link": "/learning-paths"},
    ]


def test_nav_menu_lists_shared_path_once() -> None:
    """A root path declared twice appears once with the later title."""
    replacement = BookDescriptor("reactive-v2", "/reactive/", "Reactive v2", "源码解析")
    menu = build_nav_menu([REACTIVE, replacement], NavMenuConfig())
    assert menu == [
        {"text": "源码解析", "items": [{"text": "Reactive v2", "link": "/reactive/"}]}
    ]


def test_exporter_writes_all_artefacts(tmp_path: Path) -> None:
    """JSON artefacts and the ES module are written to the output dir."""
    site = SiteConfig(books=[REACTIVE, ROUTER], output_dir=tmp_path / "generated")
    store = MappingContentStore({"reactive": "### 第一部分\n1. [effect](core/effect.md)\n"})
    result = build_navigation(site.books, store)

    written = SidebarExporter(site).write(result)

    assert [path.name for path in written] == [
        NAVIGATION_FILENAME,
        SIDEBAR_FILENAME,
        NAV_FILENAME,
        MODULE_FILENAME,
    ]
    navigation = msgspec_json.decode((tmp_path / "generated" / NAVIGATION_FILENAME).read_bytes())
    assert navigation == {
        "/reactive/": {
            "label": "Vue3 响应式系统",
            "children": [
                {
                    "label": "第一部分",
                    "children": [{"label": "effect", "href": "core/effect.md"}],
                }
            ],
        }
    }
    sidebar = msgspec_json.decode((tmp_path / "generated" / SIDEBAR_FILENAME).read_bytes())
    assert list(sidebar) == ["/reactive/"], "failed books get no sidebar"
    nav = msgspec_json.decode((tmp_path / "generated" / NAV_FILENAME).read_bytes())
    assert [item["link"] for item in nav[0]["items"]] == ["/reactive/", "/router/"]

    module = (tmp_path / "generated" / MODULE_FILENAME).read_text(encoding="utf-8")
    assert "export const sidebar = {" in module
    assert "export const nav = [" in module
    assert "Books without a compiled outline: router" in module
    assert "Vue3 响应式系统" in module, "non-ASCII labels are written verbatim"


def test_sidebar_intro_comes_from_book_that_compiled() -> None:
    """A later duplicate that failed to load does not relabel the sidebar."""
    first = BookDescriptor("a", "/x/", "Book A", "g")
    second = BookDescriptor("b", "/x/", "Book B", "g")
    result = build_navigation([first, second], MappingContentStore({"a": "### Part\n"}))

    sidebar = build_sidebar_map(result, SidebarOptions())

    assert result.owners == {"/x/": first}
    assert sidebar["/x/"][0]["text"] == "Book A", f"unexpected intro: {sidebar!r}"
    assert sidebar["/x/"][1]["text"] == "Part"

def test_exporter_output_dir_override(tmp_path: Path) -> None:
    """An explicit output directory wins over the configured one."""
    site = SiteConfig(books=[REACTIVE], output_dir=tmp_path / "configured")
    result = build_navigation(site.books, MappingContentStore({"reactive": ""}))
    written = SidebarExporter(site, output_dir=tmp_path / "override").write(result)
    assert all(path.parent == tmp_path / "override" for path in written)
    assert not (tmp_path / "configured").exists()
