#!/usr/bin/env python
"""Show how each line of a ``toc.md`` file is classified.

Run from the project environment when an outline renders unexpectedly::

    uv run python scripts/inspect_toc.py docs/router/book_zh/toc.md
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import cyclopts
from cyclopts import App, Parameter

from codebooks_nav.outline import LineKind, classify_lines

app = App(config=cyclopts.config.Env("INPUT_", command=False))


@app.default
def main(
    toc: Annotated[Path, Parameter(help="Path to a toc.md file")],
    *,
    show_ignored: Annotated[bool, Parameter()] = False,
) -> None:
    """Print one row per significant line: number, kind, label and link."""

    for line in classify_lines(toc.read_text(encoding="utf-8")):
        if line.kind is LineKind.IGNORE and not (show_ignored or line.malformed):
            continue
        kind = "malformed" if line.malformed else line.kind.value
        detail = " -> ".join(part for part in (line.label, line.link) if part)
        print(f"{line.lineno:>4}  {kind:<10}  {detail}")


if __name__ == "__main__":
    app()
