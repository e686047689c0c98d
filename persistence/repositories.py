from __future__ import annotations

import asyncio
from typing import Protocol

from pydantic import JsonValue

from .documents import LoadResult
from .interfaces import PageDocumentStore


class AsyncPageRepository(Protocol):
    async def lookup(self, page_id: str) -> LoadResult: ...
    async def load(self, page_id: str) -> JsonValue | None: ...
    async def save(self, page_id: str, doc: JsonValue) -> None: ...


class AsyncDiskPageRepository(AsyncPageRepository):
    """
    Async wrapper around the disk-backed page store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: PageDocumentStore) -> None:
        self._store = store

    @property
    def store(self) -> PageDocumentStore:
        return self._store

    async def lookup(self, page_id: str) -> LoadResult:
        return await asyncio.to_thread(self._store.lookup, page_id)

    async def load(self, page_id: str) -> JsonValue | None:
        return await asyncio.to_thread(self._store.load, page_id)

    async def save(self, page_id: str, doc: JsonValue) -> None:
        await asyncio.to_thread(self._store.save, page_id, doc)
