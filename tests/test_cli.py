"""Tests for the command-line entry point and session loop."""

import logging

from click.testing import CliRunner

from edith import __version__
from edith.cli import build_ui, main, run_session, setup_logging
from edith.config import ConfigModel, save_config


def run(args=None, input_text=""):
    runner = CliRunner()
    return runner.invoke(main, args or [], input=input_text)


class TestChat:
    """Test the interactive session through the CLI."""

    def test_default_command_is_chat(self):
        result = run(input_text="todo read book\nbye\n")

        assert result.exit_code == 0, result.output
        assert "Hello! I'm Edith" in result.output
        assert "Got it. I've added this task:" in result.output
        assert "Bye. Hope to see you again soon!" in result.output

    def test_full_session(self):
        commands = "\n".join([
            "todo read book",
            "deadline return book by Sunday",
            "event meet from 2pm to 3pm",
            "mark 2",
            "find book",
            "delete 1",
            "list",
            "bye",
        ]) + "\n"

        result = run(["chat"], commands)

        assert result.exit_code == 0, result.output
        assert "There are 2 matching tasks found." in result.output
        assert "1. [D][X] return book (by: Sunday)" in result.output
        assert "2. [E][ ] meet (from: 2pm to: 3pm)" in result.output
        assert "Now you have 2 tasks in the list." in result.output

    def test_errors_are_reported_and_session_continues(self):
        result = run(input_text="delete 1\nblah\ndeadline nothing here\ntodo ok\nbye\n")

        assert result.exit_code == 0, result.output
        assert "No tasks to delete. Task list is empty." in result.output
        assert "Invalid command" in result.output
        assert "Invalid deadline format" in result.output
        assert "Now you have 1 tasks in the list." in result.output

    def test_end_of_input_ends_session(self):
        result = run(input_text="todo read book\n")

        assert result.exit_code == 0, result.output
        assert "Bye. Hope to see you again soon!" in result.output

    def test_config_file_changes_persona(self, tmp_path):
        path = tmp_path / "custom.yaml"
        save_config(ConfigModel(bot_name="Friday", show_welcome=False), path)

        result = run(["--config", str(path)], "bye\n")

        assert result.exit_code == 0, result.output
        assert "Hello!" not in result.output
        assert "Bye." in result.output


class TestConfigFallbacks:
    """Bad configuration values fall back instead of aborting."""

    def test_unknown_border_style_falls_back(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("border_style: nonsense_style\n")

        result = run(["--config", str(path)], "todo read book\nbye\n")

        assert result.exit_code == 0, result.output
        assert "Got it. I've added this task:" in result.output
        assert "Bye. Hope to see you again soon!" in result.output

    def test_build_ui_replaces_unknown_border_style(self):
        ui = build_ui(ConfigModel(border_style="nonsense_style"))
        assert ui.border_style == "border"

    def test_build_ui_keeps_valid_border_style(self):
        ui = build_ui(ConfigModel(border_style="bold blue"))
        assert ui.border_style == "bold blue"

    def test_unwritable_log_file_falls_back(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        path = tmp_path / "custom.yaml"
        save_config(ConfigModel(log_file=str(blocker / "edith.log")), path)

        result = run(["--config", str(path)], "bye\n")

        assert result.exit_code == 0, result.output
        assert "Bye. Hope to see you again soon!" in result.output

    def test_setup_logging_uses_stderr_when_file_fails(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        setup_logging("info", str(blocker / "edith.log"))

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)
        assert isinstance(handlers[0], logging.StreamHandler)


class TestRunSession:
    """Test the session loop directly."""

    def test_bye_stops_reading(self, task_list, ui, output, monkeypatch):
        lines = iter(["todo one", "bye", "todo never"])
        monkeypatch.setattr(ui, "read_command", lambda prompt="> ": next(lines))

        run_session(task_list, ui, show_welcome=False)

        assert len(task_list) == 1
        assert "Hello!" not in output.getvalue()

    def test_keyboard_interrupt_ends_session(self, task_list, ui, output, monkeypatch):
        def interrupt(prompt="> "):
            raise KeyboardInterrupt

        monkeypatch.setattr(ui, "read_command", interrupt)

        run_session(task_list, ui)

        assert "Bye. Hope to see you again soon!" in output.getvalue()


class TestConfigCommand:
    """Test the config sub-command."""

    def test_show_config(self, tmp_path):
        result = run(["config"])

        assert result.exit_code == 0, result.output
        assert "bot_name: Edith" in result.output

    def test_init_writes_file(self, tmp_path):
        path = tmp_path / "new.yaml"

        result = run(["--config", str(path), "config", "--init"])

        assert result.exit_code == 0, result.output
        assert path.exists()
        assert "bot_name: Edith" in path.read_text()

    def test_init_refuses_to_overwrite(self, tmp_path):
        path = tmp_path / "existing.yaml"
        path.write_text("bot_name: Karen\n")

        result = run(["--config", str(path), "config", "--init"])

        assert result.exit_code == 1
        assert path.read_text() == "bot_name: Karen\n"


class TestMisc:
    """Test version output and logging setup."""

    def test_version(self):
        result = run(["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_setup_logging_to_file(self, tmp_path):
        log_file = tmp_path / "logs" / "edith.log"

        setup_logging("debug", str(log_file))
        logging.getLogger("edith.test").debug("hello log")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello log" in log_file.read_text()

    def test_setup_logging_unknown_level(self):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.WARNING
