"""Assemble per-book outline trees into the site navigation map.

:func:`build_navigation` runs the outline compiler once per
:class:`~codebooks_nav.config.BookDescriptor` and merges the resulting trees
into a :class:`NavigationMap` keyed by each book's root path. Missing outlines
are reported on the :class:`NavigationResult` instead of aborting the build,
so a collection with one broken book still produces navigation for the rest.

Example
-------
>>> from codebooks_nav.config import BookDescriptor
>>> from codebooks_nav.content_store import MappingContentStore
>>> from codebooks_nav.navigation import build_navigation
>>> books = [
...     BookDescriptor("a", "/a/", "Book A", "Source"),
...     BookDescriptor("b", "/b/", "Book B", "Source"),
... ]
>>> result = build_navigation(books, MappingContentStore({"a": "### Part"}))
>>> list(result.navigation), [f.book.name for f in result.failures]
(['/a/'], ['b'])
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from concurrent.futures import ThreadPoolExecutor

from .content_store import MissingDocumentError
from .outline import BookOutline, NavGroup, compile_outline

if typ.TYPE_CHECKING:
    from .config import BookDescriptor
    from .content_store import ContentStore


@dc.dataclass(slots=True, frozen=True)
class BookFailure:
    """A book whose outline could not be compiled."""

    book: BookDescriptor
    reason: str


class NavigationMap(cabc.Mapping[str, NavGroup]):
    """Read-only mapping of book root path to that book's navigation tree."""

    __slots__ = ("_entries",)

    def __init__(self, entries: cabc.Mapping[str, NavGroup] | None = None) -> None:
        self._entries: dict[str, NavGroup] = dict(entries or {})

    def __getitem__(self, key: str) -> NavGroup:
        return self._entries[key]

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"NavigationMap({self._entries!r})"

    def to_dict(self) -> dict[str, dict[str, typ.Any]]:
        """Return the JSON-ready ``{root_path: tree}`` representation."""
        return {key: tree.to_dict() for key, tree in self._entries.items()}


@dc.dataclass(slots=True)
class NavigationResult:
    """Outcome of a navigation build.

    Attributes
    ----------
    navigation : NavigationMap
        Trees for every book that compiled, keyed by root path.
    failures : list[BookFailure]
        Books whose outline could not be loaded, in descriptor order.
    outlines : dict[str, BookOutline]
        Compiled outlines (with diagnostics) keyed by book name.
    owners : dict[str, BookDescriptor]
        Book whose tree occupies each root path in ``navigation``.
    """

    navigation: NavigationMap
    failures: list[BookFailure] = dc.field(default_factory=list)
    outlines: dict[str, BookOutline] = dc.field(default_factory=dict)
    owners: dict[str, BookDescriptor] = dc.field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Return ``True`` when every book compiled."""
        return not self.failures


def compile_book(book: BookDescriptor, store: ContentStore) -> BookOutline:
    """Load and compile the outline for ``book``.

    Raises
    ------
    MissingDocumentError
        Propagated from ``store`` when the outline cannot be located.
    """
    document = store.load(book)
    return compile_outline(document, title=book.title)


def _compile_or_fail(
    book: BookDescriptor, store: ContentStore
) -> BookOutline | BookFailure:
    try:
        return compile_book(book, store)
    except MissingDocumentError as exc:
        return BookFailure(book=book, reason=exc.reason)


def build_navigation(
    books: cabc.Sequence[BookDescriptor],
    store: ContentStore,
    *,
    max_workers: int = 1,
) -> NavigationResult:
    """Compile every book and merge the trees into a navigation map.

    Parameters
    ----------
    books : Sequence[BookDescriptor]
        Books in configuration order.
    store : ContentStore
        Source of raw outline text.
    max_workers : int, optional
        When greater than one, outlines are loaded and compiled on a thread
        pool. Results are merged in ``books`` order either way.

    Returns
    -------
    NavigationResult
        The merged map plus any per-book failures.

    Notes
    -----
    Books sharing a root path overwrite one another; the last descriptor in
    ``books`` wins.
    """
    if max_workers > 1 and len(books) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            compiled = list(pool.map(lambda book: _compile_or_fail(book, store), books))
    else:
        compiled = [_compile_or_fail(book, store) for book in books]

    entries: dict[str, NavGroup] = {}
    failures: list[BookFailure] = []
    outlines: dict[str, BookOutline] = {}
    owners: dict[str, BookDescriptor] = {}
    for book, outcome in zip(books, compiled, strict=True):
        if isinstance(outcome, BookFailure):
            failures.append(outcome)
            continue
        entries[book.root_path] = outcome.tree
        outlines[book.name] = outcome
        owners[book.root_path] = book
    return NavigationResult(
        navigation=NavigationMap(entries),
        failures=failures,
        outlines=outlines,
        owners=owners,
    )


__all__ = [
    "BookFailure",
    "NavigationMap",
    "NavigationResult",
    "build_navigation",
    "compile_book",
]
