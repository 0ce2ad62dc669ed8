# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from tiny_todo.tasks.task_file import TaskFile


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with cli.main.

    A SimpleNamespace instead of the real config keeps tests away from
    the user's environment and the project's own .data directory.
    """
    data_dir = tmp_path / ".data"
    return SimpleNamespace(
        data_dir=data_dir,
        data_file=data_dir / "tasks.txt",
        strict_load=False,
        log_level="WARNING",
        log_file=None,
    )


@pytest.fixture()
def task_file(settings: SimpleNamespace) -> TaskFile:
    return TaskFile(settings.data_file)
