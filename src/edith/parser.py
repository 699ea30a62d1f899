"""Command parser for Edith.

Turns a raw input line into a :class:`Command` and dispatches it to a
:class:`~edith.task_list.TaskList`.
"""

from dataclasses import dataclass
import logging

from .exceptions import FormatError
from .task_list import TaskList
from .ui import Ui

logger = logging.getLogger(__name__)

ADD_COMMANDS = ("todo", "deadline", "event")
INDEX_COMMANDS = ("delete", "mark", "unmark")
BARE_COMMANDS = ("list", "bye", "help")
KNOWN_COMMANDS = ADD_COMMANDS + INDEX_COMMANDS + BARE_COMMANDS + ("find",)


@dataclass(frozen=True)
class Command:
    """A parsed user command."""
    name: str
    argument: str = ""


def parse_command(line: str) -> Command:
    """Parse one line of user input.

    The command word is case-insensitive; the rest of the line, with
    surrounding whitespace removed, becomes the argument.

    Raises:
        FormatError: For blank input, unknown commands and missing or
            unexpected arguments.
    """
    stripped = line.strip()
    if not stripped:
        raise FormatError("Please enter a command. Type 'help' to see what I can do.")

    word, *rest = stripped.split(maxsplit=1)
    name = word.lower()
    argument = rest[0].strip() if rest else ""

    if name not in KNOWN_COMMANDS:
        raise FormatError("Invalid command. Type 'help' to see what I can do.")

    if name in ADD_COMMANDS and not argument:
        raise FormatError(f"The description of a {name} cannot be empty.")
    if name in INDEX_COMMANDS and not argument:
        raise FormatError(f"Please specify the task number to {name}.")
    if name in BARE_COMMANDS and argument:
        raise FormatError(f"'{name}' does not take any arguments.")

    return Command(name=name, argument=argument)


def execute(command: Command, task_list: TaskList, ui: Ui) -> bool:
    """Run a parsed command against the task list.

    Returns True when the session should end. Errors raised by the task
    list propagate to the caller.
    """
    logger.debug(f"Executing {command.name!r}")
    name = command.name

    if name == "bye":
        return True
    if name == "help":
        ui.show_help()
    elif name == "list":
        task_list.show()
    elif name in ADD_COMMANDS:
        task_list.add(command.argument, name)
    elif name == "delete":
        task_list.delete(command.argument)
    elif name == "mark":
        task_list.mark_done(command.argument)
    elif name == "unmark":
        task_list.mark_not_done(command.argument)
    elif name == "find":
        task_list.find_by_keyword(command.argument)
    else:
        raise FormatError("Invalid command. Type 'help' to see what I can do.")
    return False
