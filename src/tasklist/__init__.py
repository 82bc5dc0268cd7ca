"""Interactive task list manager with in-memory and flat-file storage."""

__version__ = "0.1.0"
