# src/tasklist/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.ports import TaskRepo

logger = logging.getLogger(__name__)


def numbered_listing(tasks: list[str]) -> list[str]:
    """Render display strings as user-facing lines numbered from 1."""
    return [f"{n}. {text}" for n, text in enumerate(tasks, start=1)]


def parse_task_number(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def mark_task_by_number(store: TaskRepo, number: int) -> bool:
    """
    Convenience helper: mark a task by its 1-based number as shown to the user.

    Returns False when the store ignored the index.
    """
    done = store.mark_task_completed(number - 1)
    if not done:
        logger.debug("No task with number=%s", number)
    return done
