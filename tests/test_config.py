# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from tiny_todo.config import DEFAULT_DATA_DIR, USER_DATA_DIR, Settings, default_data_dir


def _clear(monkeypatch) -> None:
    for name in ("TODO_DATA_DIR", "TODO_DATA_FILE", "TODO_STRICT_LOAD", "TODO_LOG_LEVEL", "TODO_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch) -> None:
    _clear(monkeypatch)
    s = Settings.from_env()
    assert s.data_dir == DEFAULT_DATA_DIR
    assert s.data_file == DEFAULT_DATA_DIR / "tasks.txt"
    assert s.strict_load is False
    assert s.log_level == "WARNING"
    assert s.log_file is None


def test_data_dir_override_moves_data_file(monkeypatch, tmp_path: Path) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    s = Settings.from_env()
    assert s.data_file == tmp_path / "tasks.txt"


def test_explicit_overrides(monkeypatch, tmp_path: Path) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("TODO_DATA_FILE", str(tmp_path / "mine.txt"))
    monkeypatch.setenv("TODO_STRICT_LOAD", "yes")
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_LOG_FILE", str(tmp_path / "todo.log"))
    s = Settings.from_env()
    assert s.data_file == tmp_path / "mine.txt"
    assert s.strict_load is True
    assert s.log_level == "DEBUG"
    assert s.log_file == tmp_path / "todo.log"


def test_blank_values_fall_back(monkeypatch) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("TODO_STRICT_LOAD", "  ")
    monkeypatch.setenv("TODO_LOG_LEVEL", "")
    s = Settings.from_env()
    assert s.strict_load is False
    assert s.log_level == "WARNING"


def test_default_data_dir_in_checkout(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    (tmp_path / "src").mkdir()
    assert default_data_dir(tmp_path) == tmp_path / ".data"


def test_default_data_dir_outside_checkout(tmp_path: Path) -> None:
    # e.g. site-packages after a wheel install
    assert default_data_dir(tmp_path) == USER_DATA_DIR
