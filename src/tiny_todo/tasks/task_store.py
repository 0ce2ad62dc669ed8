# src/tiny_todo/tasks/task_store.py

"""
In-memory task operations.

These functions mutate a plain ``list[Task]`` and never touch the disk;
loading and saving is TaskFile's job. Ids are unique and never reused
while a larger id is still present (next id = max + 1).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from .task_models import MAX_TASK_ID, Task

logger = logging.getLogger(__name__)


class TaskIdExhaustedError(OverflowError):
    """Raised when the next id would not fit in 64 bits and could not be stored."""

    def __init__(self, last_id: int) -> None:
        super().__init__(f"no task id left after {last_id} (max is {MAX_TASK_ID})")
        self.last_id = last_id


def next_task_id(tasks: Iterable[Task]) -> int:
    last_id = max((t.id for t in tasks), default=0)
    if last_id >= MAX_TASK_ID:
        raise TaskIdExhaustedError(last_id)
    return last_id + 1


def find_task(tasks: Iterable[Task], task_id: int) -> Task | None:
    for t in tasks:
        if t.id == task_id:
            return t
    return None


def add_task(tasks: list[Task], text: str) -> Task:
    """
    Append a new pending task and return a copy of it.

    Raises TaskIdExhaustedError (list unchanged) if the largest id is already MAX_TASK_ID.
    """
    task = Task(id=next_task_id(tasks), text=text, done=False)
    tasks.append(task)
    logger.debug("Added task id=%s", task.id)
    return replace(task)


def mark_done(tasks: list[Task], task_id: int) -> bool:
    """
    Mark the task as done.

    Returns False if no task has this id. Marking an already-done task
    is a no-op that still returns True.
    """
    task = find_task(tasks, task_id)
    if task is None:
        return False
    task.done = True
    logger.debug("Marked task id=%s done", task_id)
    return True


def remove_task(tasks: list[Task], task_id: int) -> bool:
    """Remove the task with this id. Returns False if it is not there."""
    for i, t in enumerate(tasks):
        if t.id == task_id:
            del tasks[i]
            logger.debug("Removed task id=%s", task_id)
            return True
    return False
