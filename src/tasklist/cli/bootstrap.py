# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the concrete task store and wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import STORE_FILE, get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_store import FileTaskStore, InMemoryTaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def build_task_store(settings) -> TaskRepo:
    backend = str(getattr(settings, "store_backend", "memory"))
    if backend == STORE_FILE:
        return FileTaskStore(settings.tasks_path)
    return InMemoryTaskStore()


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if getattr(settings, "store_backend", None) == STORE_FILE:
        _ensure_local_dirs(settings)

    state = AppState(settings=settings, task_store=build_task_store(settings))
    logger.debug("State created backend=%s", type(state.task_store).__name__)
    return state
