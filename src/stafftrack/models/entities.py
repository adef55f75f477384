# Rev 0.1.0
"""Core entities: immutable employees and mutable task records."""
from __future__ import annotations
from dataclasses import dataclass

from .errors import ValidationError
from .types import TASK_KINDS, TaskKind


def require_text(value, field_name: str) -> str:
    """Return ``value`` trimmed; reject None, non-text and blank input."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_int(value, field_name: str, *, minimum: int) -> int:
    # bool is an int subclass; a checkbox value is never an hour count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be a whole number, got {value!r}")
    if value < minimum:
        raise ValidationError(f"{field_name} must be >= {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class Employee:
    id: int
    name: str
    department: str

    def label(self) -> str:
        return f"{self.id} - {self.name} ({self.department})"


class TaskRecord:
    """One unit of assigned work.

    ``hours_worked`` only moves forward through :meth:`advance_progress` and
    is clamped at ``duration``; reaching it flips ``completed`` for good.
    Every field is read-only from outside. Records compare by identity so
    two equal-looking assignments stay distinct entries on the board.
    """

    def __init__(self, name: str, duration: int, kind: TaskKind = "coding"):
        if kind not in TASK_KINDS:
            raise ValidationError(f"Unknown task kind {kind!r}; expected one of {', '.join(TASK_KINDS)}")
        self._name = require_text(name, "Task name")
        self._duration = require_int(duration, "Duration", minimum=1)
        self._kind = kind
        self._hours_worked = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def kind(self) -> TaskKind:
        return self._kind

    @property
    def hours_worked(self) -> int:
        return self._hours_worked

    @property
    def completed(self) -> bool:
        return self._hours_worked == self._duration

    @property
    def remaining_hours(self) -> int:
        return self._duration - self._hours_worked

    def advance_progress(self, hours: int) -> None:
        hours = require_int(hours, "Hours", minimum=0)
        self._hours_worked = min(self._hours_worked + hours, self._duration)

    def progress_percent(self) -> int:
        # integer floor division; both operands are non-negative
        return self._hours_worked * 100 // self._duration

    def label(self) -> str:
        return f"{self._name} (Duration: {self._duration} hours, Worked: {self._hours_worked} hours)"

    def __repr__(self) -> str:
        return (f"TaskRecord(name={self._name!r}, duration={self._duration}, "
                f"kind={self._kind!r}, hours_worked={self._hours_worked})")
