from __future__ import annotations

from typing import Protocol

from pydantic import JsonValue

from .documents import LoadResult


class PageDocumentStore(Protocol):
    """
    Named JSON documents, one per page id. Documents are opaque to the store.
    """

    def ensure_ready(self) -> None:
        """Create the storage root if needed. Safe to call repeatedly."""
        ...

    def lookup(self, page_id: str) -> LoadResult:
        """Read a document, reporting whether it was found, absent or corrupted."""
        ...

    def load(self, page_id: str) -> JsonValue | None:
        """Return the document, or None when it is absent or unreadable JSON."""
        ...

    def save(self, page_id: str, doc: JsonValue) -> None:
        """Overwrite the document for page_id."""
        ...
