# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so handlers don't read global config.
    settings: object

    # The one store instance for the session. Handlers only see the Protocol.
    task_store: TaskRepo
