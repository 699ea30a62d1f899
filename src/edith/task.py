"""Task data model for the Edith assistant."""

from dataclasses import dataclass
from typing import Optional
from enum import Enum


class TaskKind(Enum):
    """Task variants."""
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


TYPE_ICONS = {
    TaskKind.TODO: "T",
    TaskKind.DEADLINE: "D",
    TaskKind.EVENT: "E",
}


@dataclass(eq=False)
class Task:
    """A single task record.

    One type covers all three variants; ``kind`` selects which of the
    variant fields are meaningful:

    - todo: description only
    - deadline: ``by``
    - event: ``start`` and ``end``

    Tasks compare by identity so that two tasks with the same text stay
    distinct inside a list.
    """

    description: str
    kind: TaskKind = TaskKind.TODO
    done: bool = False

    # Variant fields
    by: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None

    @classmethod
    def todo(cls, description: str, done: bool = False) -> "Task":
        return cls(description=description, kind=TaskKind.TODO, done=done)

    @classmethod
    def deadline(cls, description: str, by: str, done: bool = False) -> "Task":
        return cls(description=description, kind=TaskKind.DEADLINE, done=done, by=by)

    @classmethod
    def event(cls, description: str, start: str, end: str, done: bool = False) -> "Task":
        return cls(description=description, kind=TaskKind.EVENT, done=done,
                   start=start, end=end)

    def get_description(self) -> str:
        return self.description

    def get_status_icon(self) -> str:
        """Return ``[X]`` for a done task, ``[ ]`` otherwise."""
        return "[X]" if self.done else "[ ]"

    def mark_as_done(self):
        """Mark the task as done."""
        self.done = True

    def mark_as_not_done(self):
        """Mark the task as not done yet."""
        self.done = False

    def summary(self) -> str:
        """Status icon and description, as shown in add/mark confirmations."""
        return f"{self.get_status_icon()} {self.description}"

    def __str__(self) -> str:
        text = f"[{TYPE_ICONS[self.kind]}]{self.get_status_icon()} {self.description}"
        if self.kind == TaskKind.DEADLINE:
            text += f" (by: {self.by})"
        elif self.kind == TaskKind.EVENT:
            text += f" (from: {self.start} to: {self.end})"
        return text
