# Rev 0.1.0
# stafftrack – TaskBoard (in-memory)
from __future__ import annotations
from typing import Dict, List, Tuple

from ..models.entities import Employee, TaskRecord
from ..models.errors import NotFoundError
from ..utils.logging_setup import get_logger


class TaskBoard:
    """
    Assignment log: employee id -> tasks in the order they were assigned.
    Keyed by the immutable id, never by the Employee object itself.
    """

    def __init__(self):
        self._tasks: Dict[int, List[TaskRecord]] = {}
        self._log = get_logger("TaskBoard")

    def assign(self, employee: Employee, task: TaskRecord) -> None:
        # no dedup: assigning the same record twice gives two entries
        self._tasks.setdefault(employee.id, []).append(task)
        self._log.info("Task assigned: %s to %s", task.label(), employee.label())

    def tasks_for(self, employee: Employee) -> Tuple[TaskRecord, ...]:
        return tuple(self._tasks.get(employee.id, ()))

    def task_at(self, employee: Employee, index: int) -> TaskRecord:
        tasks = self._tasks.get(employee.id, [])
        if not 0 <= index < len(tasks):
            raise NotFoundError(f"No task at position {index} for employee id={employee.id}")
        return tasks[index]

    def advance(self, task: TaskRecord, hours: int) -> None:
        """Pass-through to the record; ownership is not checked."""
        task.advance_progress(hours)
        self._log.debug("Progress on %r: %d/%d hours", task.name, task.hours_worked, task.duration)
