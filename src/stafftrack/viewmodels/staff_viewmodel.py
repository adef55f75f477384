# Rev 0.1.0
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..app_context import AppContext
from ..models.entities import Employee, TaskRecord
from ..models.errors import TrackerError, ValidationError
from ..utils.logging_setup import get_logger


def parse_hours(text: str, field_name: str) -> int:
    """Form text -> int. Range checks stay with the core."""
    raw = (text or "").strip()
    if not raw:
        raise ValidationError("Please fill in all fields!")
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{field_name} must be a whole number of hours, got {raw!r}") from None


class StaffViewModel(QObject):
    employeesChanged = Signal(list)
    tasksChanged = Signal(int, list)
    reportChanged = Signal(object)  # list[ProgressRow], passed through untouched
    progressChanged = Signal(int)
    errorRaised = Signal(str)

    def __init__(self, ctx: AppContext | None = None):
        super().__init__()
        self._ctx = ctx or AppContext.create()
        self._log = get_logger("StaffViewModel")

    @property
    def context(self) -> AppContext:
        return self._ctx

    # ---- queries
    def refresh(self) -> None:
        self.employeesChanged.emit([e.label() for e in self._ctx.store.list_employees()])
        self.reportChanged.emit(self._ctx.report())

    def select_employee(self, row: int) -> None:
        if row < 0:
            self.tasksChanged.emit(0, [])
            self.progressChanged.emit(0)
            return
        try:
            emp = self._ctx.store.employee_at(row)
        except TrackerError as e:
            self._fail(e)
            return
        self.tasksChanged.emit(emp.id, [t.label() for t in self._ctx.board.tasks_for(emp)])
        # task list comes back unselected; the bar follows the selection
        self.progressChanged.emit(0)

    def select_task(self, employee_row: int, task_row: int) -> None:
        if employee_row < 0 or task_row < 0:
            self.progressChanged.emit(0)
            return
        try:
            task = self._task_at(employee_row, task_row)
        except TrackerError as e:
            self._fail(e)
            return
        self.progressChanged.emit(task.progress_percent())

    # ---- commands
    def add_employee(self, name: str, department: str) -> Optional[Employee]:
        try:
            emp = self._ctx.store.add_employee(name, department)
        except TrackerError as e:
            self._fail(e)
            return None
        self.refresh()
        return emp

    def assign_task(self, employee_row: int, name: str, duration_text: str, kind: str = "coding") -> Optional[TaskRecord]:
        try:
            if employee_row < 0:
                raise ValidationError("Please select an employee first!")
            if not (name or "").strip():
                raise ValidationError("Please fill in all fields!")
            duration = parse_hours(duration_text, "Duration")
            emp = self._ctx.store.employee_at(employee_row)
            task = TaskRecord(name, duration, kind)
            self._ctx.board.assign(emp, task)
        except TrackerError as e:
            self._fail(e)
            return None
        self.select_employee(employee_row)
        self.reportChanged.emit(self._ctx.report())
        return task

    def log_hours(self, employee_row: int, task_row: int, hours_text: str) -> Optional[TaskRecord]:
        try:
            if employee_row < 0 or task_row < 0:
                raise ValidationError("Please select a task first!")
            hours = parse_hours(hours_text, "Hours")
            task = self._task_at(employee_row, task_row)
            self._ctx.board.advance(task, hours)
        except TrackerError as e:
            self._fail(e)
            return None
        self.select_employee(employee_row)
        self.progressChanged.emit(task.progress_percent())
        self.reportChanged.emit(self._ctx.report())
        return task

    # ---- internals
    def _task_at(self, employee_row: int, task_row: int) -> TaskRecord:
        emp = self._ctx.store.employee_at(employee_row)
        return self._ctx.board.task_at(emp, task_row)

    def _fail(self, err: TrackerError) -> None:
        self._log.warning("Rejected: %s", err)
        self.errorRaised.emit(str(err))
