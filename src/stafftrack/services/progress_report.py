# Rev 0.1.0
"""Performance table rows (Rev 0.1.0)
Rebuilt from scratch on every call; nothing is cached between calls.
"""
from __future__ import annotations
from typing import List

from ..models.entities import TaskRecord
from ..models.types import ProgressRow
from ..repositories.employee_store import EmployeeStore
from ..repositories.task_board import TaskBoard

COMPLETED_TEXT = "Completed"


class ProgressReport:
    COLUMNS = ("Employee Name", "Task Name", "Progress")

    @staticmethod
    def status_text(task: TaskRecord) -> str:
        if task.completed:
            return COMPLETED_TEXT
        return f"{task.progress_percent()}%"

    @classmethod
    def generate(cls, store: EmployeeStore, board: TaskBoard) -> List[ProgressRow]:
        rows: List[ProgressRow] = []
        for employee in store.list_employees():
            for task in board.tasks_for(employee):
                rows.append(ProgressRow(employee.name, task.name, cls.status_text(task)))
        return rows
