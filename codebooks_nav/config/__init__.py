"""Load and validate the book collection configuration.

This subpackage parses the project's ``books.yaml`` file into strongly typed
dataclasses (:class:`SiteConfig`, :class:`BookDescriptor`, etc.) that the
navigation compiler and VitePress exporter consume. The primary entry point is
:func:`load_site_config`, which ensures each book carries its four required
fields and resolves content and output directories.

Examples
--------
>>> from pathlib import Path
>>> from codebooks_nav.config import load_site_config
>>> site = load_site_config(Path("config/books.yaml"))  # doctest: +SKIP
>>> site.get_book("router").title  # doctest: +SKIP
'Vue Router 路由'
"""

from .loader import load_site_config
from .models import (
    BookDescriptor,
    NavLinkConfig,
    NavMenuConfig,
    SidebarOptions,
    SiteConfig,
    SiteConfigError,
)

__all__ = [
    "BookDescriptor",
    "NavLinkConfig",
    "NavMenuConfig",
    "SidebarOptions",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
