"""Cyclopts CLI entrypoint for compiling book outlines into site navigation.

The ``booknav`` console script defined here reads ``books.yaml``, compiles
every book's ``toc.md`` into a navigation tree, and writes the sidebar and
top-menu artefacts the VitePress config imports. Typical usage is running
``booknav build`` before ``vitepress build`` locally or in CI, and
``booknav outline <book>`` while editing a single outline.

Examples
--------
Build navigation for the default configuration:

>>> from codebooks_nav.cli import main
>>> main()  # doctest: +SKIP

Inspect one book's compiled tree:

>>> from codebooks_nav.cli import app
>>> app(["outline", "router", "--config", "config/books.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .content_store import (
    ContentStore,
    FileSystemContentStore,
    HttpContentStore,
    MissingDocumentError,
)
from .navigation import build_navigation, compile_book
from .vitepress import SidebarExporter

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .navigation import NavigationResult

DEFAULT_CONFIG = Path("config/books.yaml")

app = App(name="booknav", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _build_store(site_config: SiteConfig) -> ContentStore:
    """Return the content store selected by the configuration."""
    if site_config.source_base_url:
        return HttpContentStore(
            site_config.source_base_url, toc_path=site_config.toc_path
        )
    return FileSystemContentStore(
        site_config.docs_dir, toc_path=site_config.toc_path
    )


def _report_warnings(result: NavigationResult) -> None:
    for failure in result.failures:
        print(
            f"warning: toc not found for {failure.book.name} ({failure.reason})",
            file=sys.stderr,
        )
    for name, outline in result.outlines.items():
        for lineno in outline.malformed_lines:
            print(
                f"warning: {name}: skipped malformed link on line {lineno}",
                file=sys.stderr,
            )


@app.command(help="Compile every book outline and write sidebar artefacts.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to books config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    workers: typ.Annotated[
        int, Parameter(help="Compile books on this many threads")
    ] = 1,
    strict: typ.Annotated[
        bool, Parameter(help="Exit non-zero when any book outline is missing")
    ] = False,
) -> None:
    """Compile navigation for every configured book.

    Parameters
    ----------
    config : Path, optional
        Path to the ``books.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Directory receiving ``sidebar.mjs`` and the JSON artefacts; defaults
        to ``defaults.output_dir`` from the configuration.
    workers : int, optional
        Thread count used to compile books concurrently.
    strict : bool, optional
        Treat missing outlines as an error instead of a warning.

    Returns
    -------
    None
        Writes artefacts and prints their paths; warnings go to stderr.

    Raises
    ------
    SystemExit
        With status 1 when ``strict`` is set and a book failed to compile.
    """
    site_config = load_site_config(config)
    result = build_navigation(
        site_config.books, _build_store(site_config), max_workers=workers
    )
    written = SidebarExporter(site_config, output_dir=output_dir).write(result)
    for path in written:
        print(f"wrote {_format_path(path)}")
    _report_warnings(result)
    if strict and not result.ok:
        raise SystemExit(1)


@app.command(help="Print the compiled navigation tree for one book.")
def outline(
    book: typ.Annotated[str, Parameter(help="Book name from the config")],
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to books config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Compile a single book and print its tree as JSON.

    Raises
    ------
    SystemExit
        With status 1 when the book is unknown or its outline cannot be
        located.
    """
    site_config = load_site_config(config)
    try:
        descriptor = site_config.get_book(book)
    except KeyError as exc:
        print(f"error: {exc.args[0]}", file=sys.stderr)
        raise SystemExit(1) from exc
    try:
        compiled = compile_book(descriptor, _build_store(site_config))
    except MissingDocumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(json.dumps(compiled.tree.to_dict(), ensure_ascii=False, indent=2))
    for lineno in compiled.malformed_lines:
        print(f"warning: skipped malformed link on line {lineno}", file=sys.stderr)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``booknav`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
