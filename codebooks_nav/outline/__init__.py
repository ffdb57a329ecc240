"""Compile book ``toc.md`` outlines into navigation trees."""

from .builder import (
    BookOutline,
    OutlineBuilder,
    build_tree,
    compile_outline,
    parse_outline,
)
from .classifier import ClassifiedLine, LineKind, classify, classify_lines
from .models import NavGroup, NavLink, NavNode

__all__ = [
    "BookOutline",
    "ClassifiedLine",
    "LineKind",
    "NavGroup",
    "NavLink",
    "NavNode",
    "OutlineBuilder",
    "build_tree",
    "classify",
    "classify_lines",
    "compile_outline",
    "parse_outline",
]
