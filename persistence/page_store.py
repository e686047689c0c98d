from __future__ import annotations

import logging
from pathlib import Path

from pydantic import JsonValue

from .disk_store import DiskJsonDocumentStore
from .documents import LoadResult, LoadStatus
from .interfaces import PageDocumentStore
from .locks import DOCUMENT_LOCKS, PathLockRegistry
from .page_ids import validate_page_id
from .paths import document_path, ensure_dir

logger = logging.getLogger(__name__)


class DiskPageDocumentStore(PageDocumentStore):
    """
    One JSON file per page under a single root directory:

    - data/puck/dashboard.json
    - data/puck/about/team.json

    The root is passed in at construction; nothing here reads the
    environment, so tests can run several stores side by side.
    """

    def __init__(self, root: Path, *, locks: PathLockRegistry = DOCUMENT_LOCKS):
        self._root = Path(root)
        self._locks = locks

    @property
    def root(self) -> Path:
        return self._root

    def ensure_ready(self) -> None:
        ensure_dir(self._root)

    def path_for(self, page_id: str) -> Path:
        return document_path(self._root, validate_page_id(page_id))

    def lookup(self, page_id: str) -> LoadResult:
        path = self.path_for(page_id)
        self.ensure_ready()
        result = DiskJsonDocumentStore(path, locks=self._locks).lookup()
        if result.status is LoadStatus.CORRUPTED:
            logger.warning("Failed to parse data for %s (%s): %s", page_id, path, result.error)
        return result

    def load(self, page_id: str) -> JsonValue | None:
        result = self.lookup(page_id)
        return result.value if result.found else None

    def save(self, page_id: str, doc: JsonValue) -> None:
        path = self.path_for(page_id)
        self.ensure_ready()
        DiskJsonDocumentStore(path, locks=self._locks).save(doc)
        logger.debug("Saved %s to %s", page_id, path)
