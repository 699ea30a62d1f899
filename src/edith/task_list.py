"""Task list management for Edith.

The list is the single in-memory store for a session. Tasks are addressed
by their 1-based position, so deleting a task shifts every later position
down by one.

Error handling is two-tiered. Deleting from an empty list, deleting an
invalid position and malformed add input raise :class:`EdithError`
subclasses for the session loop to report. An invalid position passed to
``mark_done``/``mark_not_done`` is reported right away and the call
returns ``None`` with the list unchanged.
"""

import logging
import re
from typing import Iterator, List, Optional, Tuple, Union

from .exceptions import EmptyListError, FormatError, InvalidIndexError
from .task import Task, TaskKind
from .theme import get_task_style
from .ui import Ui

logger = logging.getLogger(__name__)

Position = Union[int, str]

DEADLINE_SEPARATOR = " by "
EVENT_SEPARATOR = re.compile(r" from | to ")
POSITION_PATTERN = re.compile(r"[+-]?[0-9]+")

DEADLINE_FORMAT_ERROR = "Invalid deadline format. Please use 'deadline <description> by <date>'."
EVENT_FORMAT_ERROR = "Invalid event format. Please use 'event <description> from <start> to <end>'."
INVALID_TASK_NUMBER = "Invalid task number. Please enter a valid task number."


def _split_fields(parts: List[str]) -> List[str]:
    """Drop trailing empty fields left over by a split."""
    while parts and not parts[-1]:
        parts.pop()
    return parts


def _parse_position(position: Position) -> Optional[int]:
    """Convert a 1-based position to an int, or None if it is not a number."""
    if isinstance(position, bool):
        return None
    if isinstance(position, int):
        return position
    text = str(position).strip()
    if not POSITION_PATTERN.fullmatch(text):
        return None
    return int(text)


class TaskList:
    """Ordered, mutable collection of tasks.

    Insertion order is display order. Every operation reports its outcome
    through the ``ui`` collaborator and also returns it so callers can act
    on the result.
    """

    def __init__(self, tasks: Optional[List[Task]] = None, ui: Optional[Ui] = None):
        self._tasks: List[Task] = tasks if tasks is not None else []
        self.ui = ui or Ui()

    @property
    def tasks(self) -> List[Task]:
        """The underlying list of tasks."""
        return self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _count_message(self) -> str:
        return f"Now you have {len(self._tasks)} tasks in the list."

    def _index_of(self, position: Position) -> Optional[int]:
        """Return the 0-based index for ``position`` or None if invalid."""
        number = _parse_position(position)
        if number is None or not 1 <= number <= len(self._tasks):
            return None
        return number - 1

    def get(self, position: Position) -> Task:
        """Return the task at a 1-based position.

        Raises:
            InvalidIndexError: If the position is non-numeric or out of range.
        """
        index = self._index_of(position)
        if index is None:
            raise InvalidIndexError(INVALID_TASK_NUMBER, position)
        return self._tasks[index]

    # -------------------- mutation --------------------

    def add(self, description: str, task_type: Union[str, TaskKind]) -> Task:
        """Build a task of the given type and append it.

        Deadline descriptions are split on ``" by "`` and event descriptions
        on ``" from "`` / ``" to "``.

        Raises:
            FormatError: If the type is unknown or required separators are missing.
        """
        kind_name = task_type.value if isinstance(task_type, TaskKind) else str(task_type)

        if kind_name == TaskKind.TODO.value:
            task = Task.todo(description)
        elif kind_name == TaskKind.DEADLINE.value:
            parts = _split_fields(description.split(DEADLINE_SEPARATOR))
            if len(parts) < 2:
                raise FormatError(DEADLINE_FORMAT_ERROR)
            task = Task.deadline(parts[0], parts[1])
        elif kind_name == TaskKind.EVENT.value:
            parts = _split_fields(EVENT_SEPARATOR.split(description))
            if len(parts) < 3:
                raise FormatError(EVENT_FORMAT_ERROR)
            task = Task.event(parts[0], parts[1], parts[2])
        else:
            raise FormatError("Invalid command.")

        self._tasks.append(task)
        logger.debug(f"Added {task.kind.value} task at position {len(self._tasks)}")
        self.ui.print_formatted_message(
            f"Got it. I've added this task:\n   {task.summary()}\n{self._count_message()}"
        )
        return task

    def delete(self, position: Position) -> Task:
        """Remove the task at a 1-based position.

        Raises:
            EmptyListError: If the list is empty, whatever the position.
            InvalidIndexError: If the position is non-numeric or out of range.
        """
        if not self._tasks:
            raise EmptyListError()

        if _parse_position(position) is None:
            raise InvalidIndexError(
                "Invalid command. Please enter a valid task number to delete.", position
            )
        index = self._index_of(position)
        if index is None:
            raise InvalidIndexError(INVALID_TASK_NUMBER, position)

        removed = self._tasks.pop(index)
        logger.debug(f"Deleted task at position {index + 1}")
        self.ui.print_formatted_message(
            f"Noted. I've removed this task:\n   {removed.summary()}\n{self._count_message()}"
        )
        return removed

    def mark_done(self, position: Position) -> Optional[Task]:
        """Mark the task at a 1-based position as done.

        Returns the task, or None when the position is invalid.
        """
        task = self._resolve_for_marking(position, "mark as done")
        if task is None:
            return None
        task.mark_as_done()
        self.ui.print_formatted_message(
            f"Nice! I've marked this task as done:\n   {task.summary()}", style=get_task_style(task.done)
        )
        return task

    def mark_not_done(self, position: Position) -> Optional[Task]:
        """Mark the task at a 1-based position as not done yet.

        Returns the task, or None when the position is invalid.
        """
        task = self._resolve_for_marking(position, "unmark")
        if task is None:
            return None
        task.mark_as_not_done()
        self.ui.print_formatted_message(
            f"OK, I've marked this task as not done yet:\n   {task.summary()}",
            style=get_task_style(task.done),
        )
        return task

    def _resolve_for_marking(self, position: Position, action: str) -> Optional[Task]:
        if _parse_position(position) is None:
            logger.debug(f"Rejected non-numeric position {position!r} for {action}")
            self.ui.print_formatted_message(
                f"Invalid command. Please enter a valid task number to {action}.",
                style="warning",
            )
            return None
        index = self._index_of(position)
        if index is None:
            logger.debug(f"Rejected out-of-range position {position!r} for {action}")
            self.ui.print_formatted_message(INVALID_TASK_NUMBER, style="warning")
            return None
        return self._tasks[index]

    # -------------------- queries --------------------

    def find_by_keyword(self, keyword: str) -> List[Tuple[int, Task]]:
        """Find tasks whose description contains ``keyword``.

        Matching is a case-sensitive substring test, so the empty keyword
        matches every task. Returns ``(position, task)`` pairs using each
        task's 1-based position in the full list.
        """
        matches = [
            (position, task)
            for position, task in enumerate(self._tasks, start=1)
            if keyword in task.get_description()
        ]
        logger.debug(f"Keyword {keyword!r} matched {len(matches)} of {len(self._tasks)} tasks")

        if not matches:
            self.ui.print_formatted_message("No matching tasks found.")
            return matches

        lines = ["Here are the matching tasks in your list:"]
        lines.extend(f"{position}. {task}" for position, task in matches)
        lines.append(f"There are {len(matches)} matching tasks found.")
        self.ui.print_formatted_message("\n".join(lines))
        return matches

    def show(self) -> None:
        """Report every task with its position."""
        if not self._tasks:
            self.ui.print_formatted_message("Your task list is empty.")
            return
        lines = ["Here are the tasks in your list:"]
        lines.extend(f"{position}. {task}" for position, task in enumerate(self._tasks, start=1))
        self.ui.print_formatted_message("\n".join(lines))

    def __str__(self) -> str:
        done = sum(1 for task in self._tasks if task.done)
        return f"{len(self._tasks)} tasks, {done} done"
