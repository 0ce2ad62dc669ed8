# src/tiny_todo/tasks/task_file.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskFileCorruptError(ValueError):
    """Raised by a strict TaskFile when a stored line cannot be decoded."""

    def __init__(self, path: Path, lineno: int, line: str) -> None:
        super().__init__(f"{path}:{lineno}: malformed task line: {line!r}")
        self.path = path
        self.lineno = lineno
        self.line = line


class TaskFile:
    """
    Flat-file task storage, one task per line (UTF-8).

    Reading:
    - a missing file means "no tasks yet" (first run)
    - malformed lines are skipped (logged at INFO), unless strict=True

    Writing:
    - lines go to "<name>.tmp" in the same directory
    - the temp file is flushed and fsync'ed, then os.replace()'d onto the target,
      so a crash mid-save leaves the previous file untouched

    OSError from the filesystem is never caught here; callers decide what to do.
    There is no locking: two concurrent saves are last-writer-wins.
    """

    def __init__(self, path: str | Path, *, strict: bool = False) -> None:
        self._path = Path(path)
        self._strict = strict

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tmp_path(self) -> Path:
        return self._path.with_name(self._path.name + ".tmp")

    def ensure_dir(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> list[Task]:
        self.ensure_dir()
        if not self._path.exists():
            logger.debug("No task file at %s, starting empty", self._path)
            return []

        data = self._path.read_bytes()
        tasks: list[Task] = []
        skipped = 0

        for lineno, raw in enumerate(data.split(b"\n"), start=1):
            if not raw.strip():
                continue
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                task = None
                line = raw.decode("utf-8", errors="replace")
            else:
                task = Task.from_line(line)

            if task is None:
                if self._strict:
                    raise TaskFileCorruptError(self._path, lineno, line)
                skipped += 1
                logger.info("Skipping malformed line %d in %s: %r", lineno, self._path, line)
                continue
            tasks.append(task)

        logger.debug("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        self.ensure_dir()
        tmp = self.tmp_path
        count = 0
        try:
            with open(tmp, "w", encoding="utf-8", newline="\n") as f:
                for task in tasks:
                    f.write(task.to_line())
                    f.write("\n")
                    count += 1
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._path)
        except BaseException:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
        logger.debug("Saved %d tasks to %s", count, self._path)
