# Rev 0.1.0
# stafftrack – EmployeeStore (in-memory)
from __future__ import annotations
from typing import Iterator, List, Tuple

from ..models.entities import Employee, require_text
from ..models.errors import NotFoundError
from ..utils.logging_setup import get_logger


class EmployeeStore:
    """
    Owns every Employee for the session, in insertion order.
    Ids are handed out as count + 1; nothing is ever removed, so ids
    stay unique and increasing.
    """

    def __init__(self):
        self._employees: List[Employee] = []
        self._log = get_logger("EmployeeStore")

    def add_employee(self, name: str, department: str) -> Employee:
        name = require_text(name, "Name")
        department = require_text(department, "Department")
        employee = Employee(id=len(self._employees) + 1, name=name, department=department)
        self._employees.append(employee)
        self._log.info("Added Employee: %s", employee.label())
        return employee

    def list_employees(self) -> Tuple[Employee, ...]:
        return tuple(self._employees)

    def find_by_id(self, employee_id: int) -> Employee:
        if isinstance(employee_id, bool) or not isinstance(employee_id, int):
            raise NotFoundError(f"Employee not found: id={employee_id!r}")
        for e in self._employees:
            if e.id == employee_id:
                return e
        raise NotFoundError(f"Employee not found: id={employee_id}")

    def employee_at(self, index: int) -> Employee:
        """Positional lookup matching the order of list_employees()."""
        if not 0 <= index < len(self._employees):
            raise NotFoundError(f"No employee at position {index}")
        return self._employees[index]

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(tuple(self._employees))
