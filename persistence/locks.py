from __future__ import annotations

import threading
from pathlib import Path


class PathLockRegistry:
    """
    Hands out one lock per document file so saves and loads of the same page
    never interleave, while different pages proceed independently.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Path, threading.Lock] = {}

    def lock_for(self, path: Path) -> threading.Lock:
        key = path.absolute()
        with self._guard:
            return self._locks.setdefault(key, threading.Lock())


DOCUMENT_LOCKS = PathLockRegistry()
