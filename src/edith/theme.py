"""Theming for Edith's console output."""

from typing import IO, Optional

from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.theme import Theme


EDITH_COLORS = {
    'primary': '#68D5F3',
    'accent': '#B7C5D3',
    'success': '#8BD649',
    'warning': '#FFD93D',
    'error': '#F78C6C',
    'text_primary': '#B7C5D3',
    'text_muted': '#4F5B66',
    'text_bright': '#FFFFFF',
    'surface_light': '#41505E',
}

EDITH_THEME = Theme({
    'default': f"{EDITH_COLORS['text_primary']}",
    'muted': f"{EDITH_COLORS['text_muted']}",
    'primary': f"{EDITH_COLORS['primary']} bold",
    'accent': f"{EDITH_COLORS['accent']}",
    'success': f"{EDITH_COLORS['success']} bold",
    'warning': f"{EDITH_COLORS['warning']} bold",
    'error': f"{EDITH_COLORS['error']} bold",
    'header': f"{EDITH_COLORS['text_bright']} bold",
    'task_done': f"{EDITH_COLORS['success']}",
    'task_pending': f"{EDITH_COLORS['primary']}",
    'border': f"{EDITH_COLORS['surface_light']}",
})


def get_themed_console(no_color: bool = False, file: Optional[IO[str]] = None) -> Console:
    """Get a console instance with the Edith theme applied.

    Passing ``file`` redirects output, e.g. to a ``StringIO`` in tests.
    """
    return Console(theme=EDITH_THEME, no_color=no_color, file=file, highlight=False)


def get_task_style(done: bool) -> str:
    """Get the style name for a task's completion state."""
    return 'task_done' if done else 'task_pending'


def is_valid_style(style: str) -> bool:
    """Check that a style is a theme name or a style rich can parse."""
    if not isinstance(style, str):
        return False
    if style in EDITH_THEME.styles:
        return True
    try:
        Style.parse(style)
    except StyleSyntaxError:
        return False
    return True
