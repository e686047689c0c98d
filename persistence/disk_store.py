from __future__ import annotations

import json
from pathlib import Path

from pydantic import JsonValue

from json_store import atomic_write_text, dumps_json, read_json_text

from .documents import LoadResult, LoadStatus
from .errors import DocumentSerializationError, StorageFaultError, WriteFaultError
from .locks import DOCUMENT_LOCKS, PathLockRegistry


class DiskJsonDocumentStore:
    """
    Stores a single JSON document on disk at a fixed path.

    - Missing file -> ABSENT; unparseable contents -> CORRUPTED.
    - Writes atomically (temp file + replace), so a reader sees either the
      previous document or the new one.
    """

    def __init__(self, path: Path, *, locks: PathLockRegistry = DOCUMENT_LOCKS):
        self._path = path
        self._locks = locks

    @property
    def path(self) -> Path:
        return self._path

    def lookup(self) -> LoadResult:
        with self._locks.lock_for(self._path):
            try:
                raw = read_json_text(self._path)
            except UnicodeDecodeError as e:
                return LoadResult.corrupted(str(e))
            except OSError as e:
                raise StorageFaultError(f"cannot read {self._path}: {e}") from e
        if raw is None:
            return LoadResult.absent()
        try:
            value = json.loads(raw)
        except (ValueError, RecursionError) as e:
            # deeply nested brackets exhaust the decoder before it reports a syntax error
            return LoadResult.corrupted(str(e))
        return LoadResult(status=LoadStatus.FOUND, value=value)

    def save(self, doc: JsonValue) -> None:
        try:
            text = dumps_json(doc)
        except (TypeError, ValueError, RecursionError) as e:
            raise DocumentSerializationError(f"document for {self._path.name} is not JSON-serializable: {e}") from e
        with self._locks.lock_for(self._path):
            try:
                atomic_write_text(self._path, text)
            except OSError as e:
                raise WriteFaultError(f"cannot write {self._path}: {e}") from e
