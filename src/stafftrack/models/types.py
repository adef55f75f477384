# Rev 0.1.0
# stafftrack type definitions

from __future__ import annotations
from typing import Literal, NamedTuple, get_args

# Task variants; "coding" was the only kind the desktop form ever created
TaskKind = Literal["coding", "review"]
TASK_KINDS: tuple[str, ...] = get_args(TaskKind)


class ProgressRow(NamedTuple):
    employee_name: str
    task_name: str
    status: str
