"""Console rendering for Edith.

Every outcome the assistant reports goes through :class:`Ui`, which wraps
the message in a rich ``Panel`` border. Task text is rendered as plain
``Text`` so that brackets in descriptions are never read as markup.
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .exceptions import EdithError
from .theme import get_themed_console


HELP_TEXT = """Commands:
  list                                   Show all tasks
  todo <description>                     Add a todo
  deadline <description> by <date>       Add a deadline
  event <description> from <start> to <end>
                                         Add an event
  mark <n>                               Mark task n as done
  unmark <n>                             Mark task n as not done yet
  delete <n>                             Delete task n
  find <keyword>                         Find tasks containing keyword
  help                                   Show this help
  bye                                    Exit"""


class Ui:
    """Display collaborator used by the task list and the session loop."""

    def __init__(self, console: Optional[Console] = None, border_style: str = "border",
                 bot_name: str = "Edith"):
        self.console = console or get_themed_console()
        self.border_style = border_style
        self.bot_name = bot_name

    def print_formatted_message(self, message: str, style: str = "") -> None:
        """Render a message wrapped in a border."""
        self.console.print(Panel(
            Text(message, style=style),
            border_style=self.border_style,
            expand=False,
            padding=(0, 1),
        ))

    def show_welcome(self) -> None:
        self.print_formatted_message(
            f"Hello! I'm {self.bot_name}\nWhat can I do for you?", style="primary"
        )

    def show_goodbye(self) -> None:
        self.print_formatted_message("Bye. Hope to see you again soon!", style="primary")

    def show_help(self) -> None:
        self.print_formatted_message(HELP_TEXT)

    def show_error(self, error: EdithError) -> None:
        """Report a user-facing error."""
        self.print_formatted_message(error.message, style="error")

    def read_command(self, prompt: str = "> ") -> str:
        """Read one line of user input.

        Raises:
            EOFError: When the input stream is exhausted.
        """
        return self.console.input(prompt)
