"""User-facing errors raised by Edith."""

from typing import Any


class EdithError(Exception):
    """Base error carrying a human-readable message for the user."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FormatError(EdithError):
    """Raised when a command or task description is malformed."""


class EmptyListError(EdithError):
    """Raised when deleting from an empty task list."""

    def __init__(self, message: str = "No tasks to delete. Task list is empty."):
        super().__init__(message)


class InvalidIndexError(EdithError):
    """Raised when a task position is non-numeric or out of range."""

    def __init__(self, message: str, position: Any = None):
        self.position = position
        super().__init__(message)
