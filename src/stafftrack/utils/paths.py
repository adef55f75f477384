# Rev 0.1.0

"""Paths and XDG helpers (Rev 0.1.0)
- Logs live under $XDG_STATE_HOME/stafftrack/logs
- Settings live under $XDG_CONFIG_HOME/stafftrack
- No business data touches disk
"""
from __future__ import annotations
import os
from pathlib import Path


APP_NAME = "stafftrack"


def _xdg(var: str, fallback: Path) -> Path:
    return Path(os.environ.get(var) or fallback).expanduser()


def state_dir() -> Path:
    return _xdg("XDG_STATE_HOME", Path.home() / ".local" / "state") / APP_NAME


def logs_dir() -> Path:
    return state_dir() / "logs"


def config_dir() -> Path:
    return _xdg("XDG_CONFIG_HOME", Path.home() / ".config") / APP_NAME


def ensure_dirs() -> None:
    for p in (state_dir(), logs_dir(), config_dir()):
        p.mkdir(parents=True, exist_ok=True)
