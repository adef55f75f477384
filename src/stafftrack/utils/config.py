# Rev 0.1.0
# src/stafftrack/utils/config.py
import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from .logging_setup import get_logger
from .paths import config_dir

_log = get_logger("config")

_DEFAULTS: Dict[str, Any] = {
    "main_window": {
        "width": 600,
        "height": 400,
    },
    "ui": {
        "diagnostics_dock_visible": False
    }
}


def settings_file() -> Path:
    return config_dir() / "settings.json"


def defaults() -> Dict[str, Any]:
    return copy.deepcopy(_DEFAULTS)


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """Stored settings merged section-by-section over the defaults."""
    path = path or settings_file()
    merged = defaults()
    if not path.exists():
        return merged
    try:
        stored = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        _log.warning("Ignoring unreadable settings %s: %s", path, e)
        return merged
    if not isinstance(stored, dict):
        _log.warning("Ignoring settings %s: top level is not an object", path)
        return merged
    for section, values in stored.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values
    return merged


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
