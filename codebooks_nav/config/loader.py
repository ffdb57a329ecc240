"""Load book collection YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_book,
    _build_nav_menu,
    _build_sidebar_options,
    _optional_str,
    _resolve_dir,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration listing every book in the collection.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/books.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with book descriptors in file order, content
        locations, and sidebar/nav presentation settings. Relative
        directories are resolved against the configuration file's parent.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If no books are defined or a book entry lacks one of ``name``,
        ``path``, ``title`` or ``group``.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from codebooks_nav.config import load_site_config
    >>> config = load_site_config(Path("config/books.yaml"))  # doctest: +SKIP
    >>> config.books[0].root_path  # doctest: +SKIP
    '/reactive/'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    base_dir = path.resolve().parent

    books_raw = raw.get("books") or []
    if not isinstance(books_raw, list) or not books_raw:
        msg = "No books defined in configuration."
        raise SiteConfigError(msg)
    books = [_build_book(index, payload) for index, payload in enumerate(books_raw)]

    defaults_template = SiteConfig(books=[])
    return SiteConfig(
        books=books,
        docs_dir=_resolve_dir(
            defaults.get("docs_dir"), defaults_template.docs_dir, base_dir
        ),
        toc_path=defaults.get("toc_path", defaults_template.toc_path),
        source_base_url=_optional_str(defaults.get("source_base_url")),
        output_dir=_resolve_dir(
            defaults.get("output_dir"), defaults_template.output_dir, base_dir
        ),
        sidebar=_build_sidebar_options(raw.get("sidebar") or {}),
        nav=_build_nav_menu(raw.get("nav") or {}),
    )


__all__ = ["load_site_config"]
