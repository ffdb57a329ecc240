"""Compile book outlines into navigation for the CoderBooks documentation site.

This package exposes the CLI entry point used by ``uv run booknav`` and the
site build scripts to turn every book's ``toc.md`` into the VitePress sidebar
and top navigation.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``build_navigation``: Library entry compiling books into a navigation map.

Examples
--------
>>> from codebooks_nav import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .navigation import build_navigation

__all__ = ["app", "build_navigation", "main"]
