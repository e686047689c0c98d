from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any


def dumps_json(payload: Any, *, indent: int = 2, sort_keys: bool = False) -> str:
    """
    Serialize a JSON document the way it is stored on disk.

    Raises TypeError/ValueError for values JSON cannot represent (circular
    structures, sets, NaN, ...).
    """
    return json.dumps(payload, indent=indent, sort_keys=sort_keys, ensure_ascii=False, allow_nan=False) + "\n"


def read_json_text(path: Path) -> str | None:
    """
    Read a stored document as text.

    Returns None when the file does not exist. Decoding errors propagate as
    UnicodeDecodeError so the caller can treat them like a parse failure.
    """
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")


def atomic_write_text(path: Path, text: str) -> None:
    """
    Atomically write text to disk by writing to a temp file then replacing.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.{os.getpid()}.{threading.get_ident()}.tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
