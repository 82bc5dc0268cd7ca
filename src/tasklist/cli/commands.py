# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_api import mark_task_by_number, numbered_listing, parse_task_number

Prompt = Callable[[str], str]
Emitter = Callable[[str], None]
MenuHandler = Callable[[AppState, Prompt, Emitter], str]

logger = logging.getLogger(__name__)

INVALID_CHOICE = "Invalid choice. Please try again."


def _parse_choice(raw: str) -> int | None:
    raw = raw.strip()
    return int(raw) if raw.isdecimal() else None


@dataclass(slots=True, frozen=True)
class MenuOption:
    label: str
    handler: MenuHandler


class MenuRegistry:
    """
    Numbered menu used by the console connector.

    Options are numbered from 1 in registration order.
    "Exit" is always the last number and is handled by the connector itself.
    """

    def __init__(self) -> None:
        self._options: list[MenuOption] = []

    def register(self, label: str, handler: MenuHandler) -> None:
        self._options.append(MenuOption(label=label, handler=handler))

    @property
    def exit_choice(self) -> int:
        return len(self._options) + 1

    def build_menu(self, title: str = "Task Manager") -> str:
        lines = [title]
        for n, opt in enumerate(self._options, start=1):
            lines.append(f"{n}. {opt.label}")
        lines.append(f"{self.exit_choice}. Exit")
        return "\n".join(lines)

    def handle(self, state: AppState, choice: str, ask: Prompt, emit: Emitter) -> str:
        """
        Run the handler for a raw menu choice ("1", "2", ...).
        Returns the reply to show. Unknown or non-numeric choices get INVALID_CHOICE.
        """
        n = _parse_choice(choice)
        if n is None or not 1 <= n <= len(self._options):
            return INVALID_CHOICE
        return self._options[n - 1].handler(state, ask, emit)


registry = MenuRegistry()


def _listing(state: AppState) -> list[str]:
    return numbered_listing(state.task_store.get_tasks())


def cmd_view(state: AppState, ask: Prompt, emit: Emitter) -> str:
    lines = _listing(state)
    if not lines:
        return "No tasks available."
    return "\n".join(["Tasks:", *lines])


def cmd_add(state: AppState, ask: Prompt, emit: Emitter) -> str:
    description = ask("Enter a new task: ")
    state.task_store.add_task(description)
    return "Task added successfully."


def cmd_mark(state: AppState, ask: Prompt, emit: Emitter) -> str:
    """
    Show the list, ask for a 1-based task number, mark it.
    """
    lines = _listing(state)
    if not lines:
        return "No tasks available to mark as completed."

    emit("\n".join(["Tasks:", *lines]))

    raw = ask("Enter the task number to mark as completed: ")
    number = parse_task_number(raw)
    if number is None:
        return "Invalid task number."

    if not mark_task_by_number(state.task_store, number):
        return f"No task with number {number}."
    return "Task marked as completed."


registry.register("View tasks", cmd_view)
registry.register("Add task", cmd_add)
registry.register("Mark task as completed", cmd_mark)
