# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.tasks.task_store import FileTaskStore, InMemoryTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="INFO",
        log_to_file=False,
        store_backend="file",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.txt",
    )


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.txt"


@pytest.fixture(params=["memory", "file"])
def store(request, tasks_path: Path):
    """Both store variants; contract tests run once per variant."""
    if request.param == "memory":
        return InMemoryTaskStore()
    return FileTaskStore(tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with an in-memory store."""
    return AppState(settings=settings, task_store=InMemoryTaskStore())
