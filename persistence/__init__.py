from __future__ import annotations

from .documents import LoadResult, LoadStatus
from .errors import (
    DocumentSerializationError,
    DocumentStoreError,
    InvalidPageIdError,
    StorageFaultError,
    WriteFaultError,
)
from .interfaces import PageDocumentStore
from .page_ids import DEFAULT_PAGE_ID, page_id_from_segments, validate_page_id
from .page_store import DiskPageDocumentStore
from .repositories import AsyncDiskPageRepository, AsyncPageRepository

__all__ = [
    "DEFAULT_PAGE_ID",
    "DiskPageDocumentStore",
    "DocumentSerializationError",
    "DocumentStoreError",
    "InvalidPageIdError",
    "LoadResult",
    "LoadStatus",
    "PageDocumentStore",
    "StorageFaultError",
    "WriteFaultError",
    "AsyncPageRepository",
    "AsyncDiskPageRepository",
    "page_id_from_segments",
    "validate_page_id",
]
