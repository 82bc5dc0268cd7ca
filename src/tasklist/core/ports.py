# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on Protocols instead of concrete stores.
This keeps the storage backend swappable and makes testing easier.
"""

from typing import Protocol


class TaskRepo(Protocol):
    """
    Task list storage.

    Tasks are addressed by their 0-based position in the current listing.
    Positions never shift: there is no delete.
    """

    def add_task(self, description: str) -> None: ...

    def get_tasks(self) -> list[str]:
        """Display strings ("[X] ..." / "[ ] ...") in insertion order."""
        ...

    def mark_task_completed(self, index: int) -> bool:
        """
        Mark the task at `index` as completed.

        Out-of-range indices are ignored (no exception, no change) and return False.
        """
        ...
