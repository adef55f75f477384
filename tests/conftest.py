# Rev 0.1.0

"""Pytest fixtures for stafftrack (Rev 0.1.0)"""
from __future__ import annotations
import pytest
from PySide6.QtCore import QCoreApplication

from stafftrack.app_context import AppContext
from stafftrack.repositories.employee_store import EmployeeStore
from stafftrack.repositories.task_board import TaskBoard


@pytest.fixture()
def store() -> EmployeeStore:
    return EmployeeStore()


@pytest.fixture()
def board() -> TaskBoard:
    return TaskBoard()


@pytest.fixture()
def ctx() -> AppContext:
    return AppContext.create()


@pytest.fixture(scope="session")
def qcore_app():
    # signals need an application object; no display required
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
