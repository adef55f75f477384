# Rev 0.1.0

from __future__ import annotations

from stafftrack.models.entities import TaskRecord
from stafftrack.models.types import ProgressRow
from stafftrack.services.progress_report import ProgressReport


def test_empty_report(store, board):
    assert ProgressReport.generate(store, board) == []
    store.add_employee("Ana", "Eng")
    assert ProgressReport.generate(store, board) == []


def test_ana_design_scenario(store, board):
    ana = store.add_employee("Ana", "Eng")
    bo = store.add_employee("Bo", "Sales")
    assert (ana.id, bo.id) == (1, 2)

    task = TaskRecord("Design", 10)
    board.assign(ana, task)

    board.advance(task, 4)
    assert task.progress_percent() == 40
    assert task.completed is False
    assert ProgressReport.generate(store, board) == [("Ana", "Design", "40%")]

    board.advance(task, 6)
    assert task.progress_percent() == 100
    assert task.completed is True
    assert ProgressReport.generate(store, board) == [("Ana", "Design", "Completed")]


def test_rows_follow_store_then_assignment_order(store, board):
    ana = store.add_employee("Ana", "Eng")
    bo = store.add_employee("Bo", "Sales")
    cy = store.add_employee("Cy", "Ops")

    # assign out of store order on purpose
    t_call = TaskRecord("Call", 4)
    board.assign(bo, t_call)
    board.assign(ana, TaskRecord("Design", 10))
    board.assign(ana, TaskRecord("Review", 3, kind="review"))
    board.advance(t_call, 1)

    rows = ProgressReport.generate(store, board)
    assert rows == [
        ProgressRow("Ana", "Design", "0%"),
        ProgressRow("Ana", "Review", "0%"),
        ProgressRow("Bo", "Call", "25%"),
    ]
    assert all(r.employee_name != cy.name for r in rows)


def test_report_is_recomputed_each_call(store, board):
    e = store.add_employee("Ana", "Eng")
    t = TaskRecord("Thirds", 3)
    board.assign(e, t)
    first = ProgressReport.generate(store, board)
    board.advance(t, 2)
    second = ProgressReport.generate(store, board)
    assert first[0].status == "0%"
    assert second[0].status == "66%"


def test_columns():
    assert ProgressReport.COLUMNS == ("Employee Name", "Task Name", "Progress")
