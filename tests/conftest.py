from __future__ import annotations

from dataclasses import replace
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Run from a temp project directory with PUCK_DATA_DIR pointing inside it,
    so tests never touch real ./data (app.py builds an app at import time).
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PUCK_DATA_DIR", str(tmp_path / "data" / "puck"))
    return tmp_path


@pytest.fixture
def page_store(sandbox_project: Path):
    from persistence import DiskPageDocumentStore

    return DiskPageDocumentStore(sandbox_project / "data" / "puck")


@pytest.fixture
def client(sandbox_project: Path):
    from fastapi.testclient import TestClient

    import app as app_module
    from settings import get_settings

    settings = replace(get_settings(), data_dir=sandbox_project / "data" / "puck")
    return TestClient(app_module.create_app(settings))
