# src/tiny_todo/tasks/task_models.py

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

FIELD_DELIMITER = "|"
MAX_TASK_ID = 2**64 - 1

_DONE_FLAGS = {"0": False, "1": True}
_ID_RE = re.compile(r"[0-9]+")


@dataclass(slots=True)
class Task:
    """
    One to-do entry.

    On disk a task is a single line: ``<id>|<done_flag>|<text>``.
    Only the first two delimiters split fields, so ``text`` may contain ``|``.
    A line break inside ``text`` is not escaped and breaks the file layout.
    """

    id: int
    text: str
    done: bool = False

    def to_line(self) -> str:
        if "\n" in self.text or "\r" in self.text:
            logger.warning("Task %s text contains a line break; it will not load back intact", self.id)
        flag = "1" if self.done else "0"
        return f"{self.id}{FIELD_DELIMITER}{flag}{FIELD_DELIMITER}{self.text}"

    @classmethod
    def from_line(cls, line: str) -> Task | None:
        """Decode one stored line. Returns None if the line is malformed."""
        line = line.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]

        parts = line.split(FIELD_DELIMITER, 2)
        if len(parts) != 3:
            return None
        raw_id, raw_flag, text = parts

        if not _ID_RE.fullmatch(raw_id):
            return None
        task_id = int(raw_id)
        if task_id > MAX_TASK_ID:
            return None

        done = _DONE_FLAGS.get(raw_flag)
        if done is None:
            return None

        return cls(id=task_id, text=text, done=done)
