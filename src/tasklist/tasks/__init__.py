"""
Task subsystem.

Components:
- task_models.py: Task, display marks and the line codec
- task_store.py: in-memory and flat-file stores
- task_api.py: small high-level helpers used by the console controller
"""

from .task_models import Task
from .task_store import FileTaskStore, InMemoryTaskStore, InvalidDescriptionError, TaskStoreError

__all__ = ["FileTaskStore", "InMemoryTaskStore", "InvalidDescriptionError", "Task", "TaskStoreError"]
