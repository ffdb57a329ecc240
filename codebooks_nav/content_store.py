"""Sources of raw ``toc.md`` text for each book.

The navigation compiler never touches files or the network itself; it asks a
:class:`ContentStore` for the outline belonging to a
:class:`~codebooks_nav.config.BookDescriptor`. Stores raise
:class:`MissingDocumentError` when a book's outline cannot be located so the
merger can record the failure and carry on with the remaining books.

Three stores are provided:

- :class:`FileSystemContentStore` reads ``<docs_dir>/<name>/<toc_path>``, the
  layout used by the VitePress docs tree.
- :class:`HttpContentStore` fetches ``<base_url>/<name>/<toc_path>`` with
  retries, for building navigation from a published content repository.
- :class:`MappingContentStore` serves in-memory text keyed by book name.

Example
-------
>>> from codebooks_nav.config import BookDescriptor
>>> from codebooks_nav.content_store import MappingContentStore
>>> book = BookDescriptor("router", "/router/", "Vue Router", "Source")
>>> MappingContentStore({"router": "### Part 1"}).load(book)
'### Part 1'
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ._constants import DEFAULT_TOC_PATH

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import BookDescriptor


class MissingDocumentError(LookupError):
    """Raised when a book's outline document cannot be located."""

    def __init__(self, book: BookDescriptor, reason: str) -> None:
        super().__init__(f"toc not found for {book.name}: {reason}")
        self.book = book
        self.reason = reason


class ContentStore(typ.Protocol):
    """Anything that can return the outline text for a book."""

    def load(self, book: BookDescriptor) -> str:
        """Return the raw outline text or raise :class:`MissingDocumentError`."""
        ...


class FileSystemContentStore:
    """Read outlines from a local docs tree."""

    def __init__(self, docs_dir: Path, *, toc_path: str = DEFAULT_TOC_PATH) -> None:
        self.docs_dir = docs_dir
        self.toc_path = toc_path

    def path_for(self, book: BookDescriptor) -> Path:
        """Return the expected outline location for ``book``."""
        return self.docs_dir / book.name / self.toc_path

    def load(self, book: BookDescriptor) -> str:
        """Return the UTF-8 outline text for ``book``."""
        path = self.path_for(book)
        if not path.is_file():
            raise MissingDocumentError(book, f"{path} does not exist")
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise MissingDocumentError(book, f"{path}: {exc}") from exc


class MappingContentStore:
    """Serve outlines from an in-memory mapping of book name to text."""

    def __init__(self, documents: cabc.Mapping[str, str]) -> None:
        self.documents = dict(documents)

    def load(self, book: BookDescriptor) -> str:
        """Return the stored outline for ``book``."""
        try:
            return self.documents[book.name]
        except KeyError as exc:
            raise MissingDocumentError(book, "no document registered") from exc


class HttpContentStore:
    """Fetch outlines over HTTP(S) from a published content tree."""

    def __init__(
        self,
        base_url: str,
        *,
        toc_path: str = DEFAULT_TOC_PATH,
        session: requests.Session | None = None,
        timeout: float = 30,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.toc_path = toc_path.lstrip("/")
        self.timeout = timeout
        self._session = session

    def url_for(self, book: BookDescriptor) -> str:
        """Return the outline URL for ``book``."""
        return f"{self.base_url}/{book.name}/{self.toc_path}"

    def load(self, book: BookDescriptor) -> str:
        """Download the outline for ``book``, retrying transient failures."""
        url = self.url_for(book)
        session = self._session or _build_retrying_session()
        try:
            resp = session.get(url, timeout=self.timeout)
            if resp.status_code == 404:
                raise MissingDocumentError(book, f"{url} returned 404")
            resp.raise_for_status()
            resp.encoding = "utf-8"
            return resp.text
        except requests.RequestException as exc:
            raise MissingDocumentError(book, f"{url}: {exc}") from exc
        finally:
            if self._session is None:
                session.close()


def _build_retrying_session() -> requests.Session:
    """Return a session that retries idempotent requests on server errors."""
    session = requests.Session()
    retry = Retry(
        total=5,
        read=5,
        connect=3,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=("GET", "HEAD"),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


__all__ = [
    "DEFAULT_TOC_PATH",
    "ContentStore",
    "FileSystemContentStore",
    "HttpContentStore",
    "MappingContentStore",
    "MissingDocumentError",
]
