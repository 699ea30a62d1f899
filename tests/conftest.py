"""Pytest configuration and shared fixtures."""

import io
import logging
import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from edith.config import Config  # noqa: E402
from edith.task_list import TaskList  # noqa: E402
from edith.theme import get_themed_console  # noqa: E402
from edith.ui import Ui  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_state(tmp_path, monkeypatch):
    """Keep config and logging state from leaking between tests."""
    monkeypatch.setenv("EDITH_CONFIG", str(tmp_path / "config.yaml"))
    Config._instance = None
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    Config._instance = None
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def ui(output):
    """Ui that renders into an in-memory buffer."""
    return Ui(get_themed_console(no_color=True, file=output))


@pytest.fixture
def task_list(ui):
    return TaskList(ui=ui)
