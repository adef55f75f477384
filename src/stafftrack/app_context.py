# stafftrack application context
# Rev 0.1.0

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .models.types import ProgressRow
from .repositories.employee_store import EmployeeStore
from .repositories.task_board import TaskBoard
from .services.progress_report import ProgressReport
from .utils.logging_setup import get_logger


@dataclass
class AppContext:
    """Central container for the session's in-memory state."""
    store: EmployeeStore = field(default_factory=EmployeeStore)
    board: TaskBoard = field(default_factory=TaskBoard)

    @classmethod
    def create(cls) -> "AppContext":
        ctx = cls()
        get_logger("AppContext").info("AppContext initialized (in-memory session)")
        return ctx

    def report(self) -> List[ProgressRow]:
        return ProgressReport.generate(self.store, self.board)
