# src/tasklist/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStoreError(RuntimeError):
    """A storage operation could not be completed (the OSError or decode error is the __cause__)."""


class InvalidDescriptionError(ValueError):
    """The description cannot be stored as one line of the task file."""


class InMemoryTaskStore:
    """Task store kept in process memory. Tasks are lost on exit."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        logger.info("InMemoryTaskStore ready")

    def add_task(self, description: str) -> None:
        self._tasks.append(Task(description=description))
        logger.debug("Task added index=%s", len(self._tasks) - 1)

    def get_tasks(self) -> list[str]:
        return [t.display() for t in self._tasks]

    def mark_task_completed(self, index: int) -> bool:
        if not 0 <= index < len(self._tasks):
            logger.debug("Ignoring mark for index=%s (count=%s)", index, len(self._tasks))
            return False
        self._tasks[index].completed = True
        return True



class FileTaskStore:
    """
    Flat-file task store.

    File format (UTF-8, one task per line):
      <description>,<true|false>

    Every public method is self-contained:
    - opens the file, reads or writes, closes it
    - no handle or cached tasks are kept between calls

    A missing file means "no tasks". A file that cannot be read or is not
    valid UTF-8 lists as empty and is never rewritten. Rewrites
    (mark_task_completed) go to a fresh temp file in the same directory which
    is then renamed over the original.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        try:
            total = len(self._read_tasks())
        except Exception:
            total = -1
        logger.info("FileTaskStore ready path=%s total=%s", self._path, total)

    # ---- low-level helpers ----

    def _read_tasks(self) -> list[Task]:
        """
        Decode every non-blank line.

        Raises FileNotFoundError / OSError / UnicodeDecodeError; callers decide how to treat them.
        """
        with self._path.open("r", encoding="utf-8", newline="") as f:
            return [Task.from_line(line) for line in f if line.strip("\r\n")]

    def _rewrite(self, tasks: list[Task]) -> None:
        tmp: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="\n",
                dir=self._path.parent,
                prefix=self._path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp = Path(f.name)
                for t in tasks:
                    f.write(t.to_line() + "\n")
            os.replace(tmp, self._path)
        except OSError as e:
            if tmp is not None:
                with contextlib.suppress(OSError):
                    tmp.unlink()
            raise TaskStoreError(f"Failed to rewrite task file {self._path}") from e

    @staticmethod
    def _check_description(description: str) -> None:
        if "\n" in description or "\r" in description:
            raise InvalidDescriptionError("task description must be a single line")
        try:
            description.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidDescriptionError("task description is not valid text (cannot be saved as UTF-8)") from e

    # ---- public API ----

    def add_task(self, description: str) -> None:
        self._check_description(description)
        line = Task(description=description).to_line()
        try:
            with self._path.open("a", encoding="utf-8", newline="\n") as f:
                f.write(line + "\n")
        except OSError as e:
            raise TaskStoreError(f"Failed to append to task file {self._path}") from e
        logger.debug("Task appended path=%s", self._path)

    def get_tasks(self) -> list[str]:
        try:
            tasks = self._read_tasks()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError):
            logger.warning("Task file %s is unreadable; showing no tasks.", self._path, exc_info=True)
            return []
        return [t.display() for t in tasks]

    def mark_task_completed(self, index: int) -> bool:
        """
        Read-modify-write.

        - out-of-range index: nothing is written, returns False
        - unreadable or non-UTF-8 (but existing) file: TaskStoreError, the file is left alone
        """
        try:
            tasks = self._read_tasks()
        except FileNotFoundError:
            tasks = []
        except (OSError, UnicodeDecodeError) as e:
            raise TaskStoreError(f"Failed to read task file {self._path}") from e

        if not 0 <= index < len(tasks):
            logger.debug("Ignoring mark for index=%s (count=%s)", index, len(tasks))
            return False

        tasks[index].completed = True
        self._rewrite(tasks)
        logger.debug("Task marked completed index=%s path=%s", index, self._path)
        return True
