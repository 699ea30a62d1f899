"""Command-line interface for Edith."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.text import Text

from . import __version__
from .config import ConfigModel, get_config_path, load_config, save_config
from .exceptions import EdithError
from .parser import execute, parse_command
from .task_list import TaskList
from .theme import get_themed_console, is_valid_style
from .ui import Ui

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Configure root logging once per process.

    Logs go to stderr, or to ``log_file`` when one is configured, so they
    never mix with the assistant's panels on stdout.
    """
    handler: Optional[logging.Handler] = None
    file_error: Optional[OSError] = None
    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            file_error = e
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )

    if file_error is not None:
        logger.warning(f"Cannot write log file {log_file}: {file_error}. Logging to stderr.")


def run_session(task_list: TaskList, ui: Ui, show_welcome: bool = True) -> None:
    """Read, parse and execute commands until ``bye`` or end of input."""
    if show_welcome:
        ui.show_welcome()

    while True:
        try:
            line = ui.read_command()
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, ending session")
            break

        try:
            if execute(parse_command(line), task_list, ui):
                break
        except EdithError as e:
            logger.debug(f"{type(e).__name__}: {e.message}")
            ui.show_error(e)

    logger.info(f"Session ended with {task_list}")
    ui.show_goodbye()


def build_ui(config: ConfigModel) -> Ui:
    """Create the display collaborator from configuration."""
    border_style = config.border_style
    if not is_valid_style(border_style):
        logger.warning(f"Unknown border style {border_style!r}, using 'border'")
        border_style = "border"

    console = get_themed_console(no_color=config.no_color)
    return Ui(console, border_style=border_style, bot_name=config.bot_name)


@click.group(invoke_without_command=True)
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, prog_name="edith")
@click.pass_context
def main(ctx, config_path, verbose):
    """Edith - a personal task-tracking assistant."""
    ctx.ensure_object(dict)

    config = load_config(config_path)
    setup_logging("DEBUG" if verbose else config.log_level, config.log_file)

    ctx.obj['config'] = config
    ctx.obj['config_path'] = config_path or get_config_path()

    # No command: start chatting
    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.pass_context
def chat(ctx):
    """Start an interactive session.

    Tasks live in memory and are discarded when the session ends.
    """
    config = ctx.obj['config']
    ui = build_ui(config)
    run_session(TaskList(ui=ui), ui, show_welcome=config.show_welcome)


@main.command("config")
@click.option("--init", is_flag=True, help="Write the active settings to the config file")
@click.pass_context
def config_command(ctx, init):
    """Show the active configuration."""
    config = ctx.obj['config']
    config_path = ctx.obj['config_path']
    console = get_themed_console(no_color=config.no_color)

    if init:
        if config_path.exists():
            console.print(f"[warning]Config file already exists: {config_path}[/warning]")
            sys.exit(1)
        save_config(config, config_path)
        console.print(f"[success]Wrote configuration to {config_path}[/success]")
        return

    console.print(f"[header]Configuration[/header] [muted]({config_path})[/muted]")
    console.print(Text(config.to_yaml().rstrip()))
