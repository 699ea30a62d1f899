"""Edith - a personal task-tracking command-line assistant."""

__version__ = "0.1.0"
__author__ = "Edith Team"

from .exceptions import EdithError, FormatError, EmptyListError, InvalidIndexError
from .task import Task, TaskKind
from .task_list import TaskList
from .ui import Ui

__all__ = [
    "Task",
    "TaskKind",
    "TaskList",
    "Ui",
    "EdithError",
    "FormatError",
    "EmptyListError",
    "InvalidIndexError",
    "__version__",
]
