from __future__ import annotations

from pathlib import Path

from .errors import StorageFaultError


def ensure_dir(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageFaultError(f"cannot create store directory {path}: {e}") from e
    return path


def document_path(root: Path, page_id: str) -> Path:
    # "about/team" -> <root>/about/team.json
    *parents, name = page_id.split("/")
    return root.joinpath(*parents, f"{name}.json")
