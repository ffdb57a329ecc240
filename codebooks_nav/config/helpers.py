"""Utility helpers shared by the book configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import (
    BookDescriptor,
    NavLinkConfig,
    NavMenuConfig,
    SidebarOptions,
    SiteConfigError,
)

REQUIRED_BOOK_FIELDS = ("name", "path", "title", "group")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_dir(value: object | None, default: Path, base_dir: Path) -> Path:
    """Return ``value`` as a path, anchoring relative paths at ``base_dir``."""
    path = Path(str(value)) if value else default
    if path.is_absolute():
        return path
    return base_dir / path


def _build_book(index: int, payload: object) -> BookDescriptor:
    """Build a BookDescriptor from one entry of the ``books`` list."""
    if not isinstance(payload, dict):
        msg = f"Book entry #{index + 1} must be a mapping."
        raise SiteConfigError(msg)
    values = {key: _optional_str(payload.get(key)) for key in REQUIRED_BOOK_FIELDS}
    missing = [key for key, value in values.items() if value is None]
    if missing:
        label = values["name"] or f"#{index + 1}"
        msg = f"Book '{label}' is missing required field(s): {', '.join(missing)}."
        raise SiteConfigError(msg)
    return BookDescriptor(
        name=typ.cast("str", values["name"]),
        root_path=typ.cast("str", values["path"]),
        title=typ.cast("str", values["title"]),
        group=typ.cast("str", values["group"]),
    )


def _build_nav_links(payload: object) -> list[NavLinkConfig]:
    """Convert a list of ``{text, link}`` mappings, skipping incomplete entries."""
    if not isinstance(payload, list):
        return []
    links: list[NavLinkConfig] = []
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        text = _optional_str(entry.get("text"))
        link = _optional_str(entry.get("link"))
        if text and link:
            links.append(NavLinkConfig(text=text, link=link))
    return links


def _build_nav_menu(payload: typ.Mapping[str, typ.Any]) -> NavMenuConfig:
    """Build the top navigation config from the ``nav`` mapping."""
    labels_raw = payload.get("group_labels") or {}
    group_labels = {
        str(group): str(label)
        for group, label in labels_raw.items()
        if _optional_str(label)
    }
    return NavMenuConfig(
        leading=_build_nav_links(payload.get("leading")),
        trailing=_build_nav_links(payload.get("trailing")),
        group_labels=group_labels,
    )


def _build_sidebar_options(payload: typ.Mapping[str, typ.Any]) -> SidebarOptions:
    """Build SidebarOptions from the ``sidebar`` mapping, keeping defaults."""
    base = SidebarOptions()
    return SidebarOptions(
        intro_label=payload.get("intro_label", base.intro_label),
        toc_label=payload.get("toc_label", base.toc_label),
        toc_link=payload.get("toc_link", base.toc_link),
        collapsed=bool(payload.get("collapsed", base.collapsed)),
    )


__all__ = [
    "REQUIRED_BOOK_FIELDS",
    "_build_book",
    "_build_nav_menu",
    "_build_sidebar_options",
    "_optional_str",
    "_resolve_dir",
]
