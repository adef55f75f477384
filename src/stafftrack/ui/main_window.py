# Rev 0.1.0
# stafftrack — Main Window
# Form (top) | Employees (left) | Tasks (center) | Performance (right) | Progress (bottom)

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit,
    QComboBox, QPushButton, QListWidget, QProgressBar, QTableWidget, QTableWidgetItem,
    QHeaderView, QMessageBox, QAbstractItemView,
)

from ..models.types import TASK_KINDS
from ..services.progress_report import ProgressReport
from ..utils.config import load_settings, save_settings
from ..utils.logging_setup import get_logger
from ..viewmodels.staff_viewmodel import StaffViewModel


class MainWindow(QMainWindow):
    def __init__(self, vm: StaffViewModel, *, settings: dict | None = None, parent=None):
        super().__init__(parent)
        self._vm = vm
        self._settings = settings if settings is not None else load_settings()
        self._log = get_logger("MainWindow")

        self.setWindowTitle("Employee Task Management")
        geom = self._settings.get("main_window", {})
        self.resize(int(geom.get("width", 600)), int(geom.get("height", 400)))

        # ---- form ----
        self._name = QLineEdit()
        self._department = QLineEdit()
        self._btn_add_employee = QPushButton("Add Employee")

        self._task_name = QLineEdit()
        self._task_duration = QLineEdit()
        self._task_duration.setPlaceholderText("hours")
        self._task_kind = QComboBox()
        for k in TASK_KINDS:
            self._task_kind.addItem(k.capitalize(), userData=k)
        self._btn_assign = QPushButton("Assign Task")

        self._hours = QLineEdit()
        self._hours.setPlaceholderText("hours")
        self._btn_log_hours = QPushButton("Log Hours")

        form = QGridLayout()
        form.addWidget(QLabel("Name:"), 0, 0)
        form.addWidget(self._name, 0, 1)
        form.addWidget(QLabel("Department:"), 1, 0)
        form.addWidget(self._department, 1, 1)
        form.addWidget(self._btn_add_employee, 1, 2)
        form.addWidget(QLabel("Task Name:"), 2, 0)
        form.addWidget(self._task_name, 2, 1)
        form.addWidget(self._task_kind, 2, 2)
        form.addWidget(QLabel("Task Duration (hrs):"), 3, 0)
        form.addWidget(self._task_duration, 3, 1)
        form.addWidget(self._btn_assign, 3, 2)
        form.addWidget(QLabel("Hours Worked:"), 4, 0)
        form.addWidget(self._hours, 4, 1)
        form.addWidget(self._btn_log_hours, 4, 2)

        # ---- lists ----
        self._employees = QListWidget()
        self._employees.setSelectionMode(QAbstractItemView.SingleSelection)
        self._tasks = QListWidget()
        self._tasks.setSelectionMode(QAbstractItemView.SingleSelection)

        # ---- performance table: Employee Name | Task Name | Progress ----
        self._table = QTableWidget(0, len(ProgressReport.COLUMNS))
        self._table.setHorizontalHeaderLabels(list(ProgressReport.COLUMNS))
        self._table.setEditTriggers(QTableWidget.NoEditTriggers)
        self._table.setSelectionBehavior(QTableWidget.SelectRows)
        self._table.verticalHeader().setVisible(False)
        self._table.setAlternatingRowColors(True)
        hdr = self._table.horizontalHeader()
        hdr.setSectionResizeMode(0, QHeaderView.Stretch)            # Employee
        hdr.setSectionResizeMode(1, QHeaderView.Stretch)            # Task
        hdr.setSectionResizeMode(2, QHeaderView.ResizeToContents)   # Progress

        self._progress = QProgressBar()
        self._progress.setRange(0, 100)
        self._progress.setTextVisible(True)

        # ---- layout ----
        middle = QHBoxLayout()
        middle.addWidget(self._employees, 1)
        middle.addWidget(self._tasks, 1)
        middle.addWidget(self._table, 2)

        central = QWidget(self)
        root = QVBoxLayout(central)
        root.addLayout(form)
        root.addLayout(middle, 1)
        root.addWidget(self._progress)
        self.setCentralWidget(central)

        if self._settings.get("ui", {}).get("diagnostics_dock_visible"):
            from .diagnostics_dock import DiagnosticsDock
            self.addDockWidget(Qt.BottomDockWidgetArea, DiagnosticsDock(self))

        # ---- wiring ----
        self._btn_add_employee.clicked.connect(self._on_add_employee)
        self._btn_assign.clicked.connect(self._on_assign_task)
        self._btn_log_hours.clicked.connect(self._on_log_hours)
        self._employees.currentRowChanged.connect(self._vm.select_employee)
        self._tasks.currentRowChanged.connect(self._on_task_row_changed)

        self._vm.employeesChanged.connect(self._on_employees_changed)
        self._vm.tasksChanged.connect(self._on_tasks_changed)
        self._vm.reportChanged.connect(self._render_report)
        self._vm.progressChanged.connect(self._progress.setValue)
        self._vm.errorRaised.connect(self._show_error)

        self._vm.refresh()

    # -------------------- actions --------------------

    def _on_add_employee(self):
        if self._vm.add_employee(self._name.text(), self._department.text()) is None:
            return
        self._name.clear()
        self._department.clear()

    def _on_assign_task(self):
        task = self._vm.assign_task(
            self._employees.currentRow(),
            self._task_name.text(),
            self._task_duration.text(),
            self._task_kind.currentData(),
        )
        if task is not None:
            self._task_name.clear()
            self._task_duration.clear()

    def _on_log_hours(self):
        task_row = self._tasks.currentRow()
        if self._vm.log_hours(self._employees.currentRow(), task_row, self._hours.text()) is None:
            return
        self._hours.clear()
        self._tasks.setCurrentRow(task_row)

    def _on_task_row_changed(self, row: int):
        self._vm.select_task(self._employees.currentRow(), row)

    # -------------------- rendering --------------------

    def _on_employees_changed(self, labels: list):
        current = self._employees.currentRow()
        self._employees.blockSignals(True)
        self._employees.clear()
        self._employees.addItems(labels)
        self._employees.blockSignals(False)
        if 0 <= current < len(labels):
            self._employees.setCurrentRow(current)

    def _on_tasks_changed(self, _employee_id: int, labels: list):
        self._tasks.blockSignals(True)
        self._tasks.clear()
        self._tasks.addItems(labels)
        self._tasks.blockSignals(False)

    def _render_report(self, rows: list):
        self._table.setRowCount(0)
        for r in rows:
            row = self._table.rowCount()
            self._table.insertRow(row)
            self._table.setItem(row, 0, QTableWidgetItem(r.employee_name))
            self._table.setItem(row, 1, QTableWidgetItem(r.task_name))
            item = QTableWidgetItem(r.status)
            item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self._table.setItem(row, 2, item)

    def _show_error(self, message: str):
        QMessageBox.warning(self, "Employee Task Management", message)

    # -------------------- lifecycle --------------------

    def closeEvent(self, ev):
        self._settings.setdefault("main_window", {}).update(width=self.width(), height=self.height())
        try:
            save_settings(self._settings)
        except OSError as e:
            self._log.warning("Could not save settings: %s", e)
        super().closeEvent(ev)
