# Rev 0.1.0

# stafftrack – logging setup (Rev 0.1.0)
from __future__ import annotations
import logging, os, sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from PySide6.QtCore import qInstallMessageHandler, QtMsgType

from .paths import APP_NAME, logs_dir

FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def _qt_handler(msg_type, context, message):
    logging.getLogger(f"{APP_NAME}.qt").log(_QT_LEVELS.get(msg_type, logging.INFO), message)


def get_logger(name: str) -> logging.Logger:
    """Child of the app logger, e.g. get_logger("TaskBoard") -> stafftrack.TaskBoard."""
    return logging.getLogger(f"{APP_NAME}.{name}")


def log_file_path() -> Path | None:
    """Path of the active rotating log file, if setup_logging() ran."""
    for h in logging.getLogger(APP_NAME).handlers:
        if isinstance(h, RotatingFileHandler):
            return Path(h.baseFilename)
    return None


def setup_logging(app_name: str = APP_NAME) -> Path:
    # Level via env (DEBUG/INFO/WARNING/ERROR), default INFO
    level_name = os.environ.get("STAFFTRACK_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    log_dir = logs_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    logfile = log_dir / f"{app_name}.log"

    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    # File: rotate at 5MB, keep 7 backups
    fh = RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=7, encoding="utf-8")
    fh.setFormatter(logging.Formatter(FMT, DATEFMT))
    fh.setLevel(level)
    logger.addHandler(fh)

    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(logging.Formatter(FMT, DATEFMT))
    ch.setLevel(level)
    logger.addHandler(ch)

    # Uncaught exceptions → log as ERROR
    def _excepthook(exctype, value, tb):
        logging.getLogger(f"{APP_NAME}.unhandled").error("Uncaught exception", exc_info=(exctype, value, tb))
        sys.__excepthook__(exctype, value, tb)
    sys.excepthook = _excepthook

    qInstallMessageHandler(_qt_handler)

    logger.info("Logging initialized at %s; file: %s", level_name, logfile)
    return logfile


def tail_log(path: Path | None, max_lines: int = 500) -> str:
    """Last ``max_lines`` of the log, or a placeholder the UI can show."""
    if path is None:
        return "(logging not initialized)"
    try:
        with path.open("r", encoding="utf-8", errors="replace") as f:
            lines = f.readlines()
        return "".join(lines[-max_lines:])
    except FileNotFoundError:
        return "(log file not found)"
    except OSError as e:
        return f"(error reading log: {e})"


def log_signature(path: Path | None) -> tuple[int, int] | None:
    """(size, mtime_ns) of the log; None when there is nothing to read."""
    if path is None:
        return None
    try:
        st = path.stat()
    except OSError:
        return None
    return st.st_size, st.st_mtime_ns
