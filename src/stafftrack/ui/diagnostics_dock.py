# Rev 0.1.1
# src/stafftrack/ui/diagnostics_dock.py
from __future__ import annotations

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QTextCursor
from PySide6.QtWidgets import QDockWidget, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QPlainTextEdit, QLabel, QCheckBox

from ..utils.logging_setup import log_file_path, log_signature, tail_log

POLL_MS = 1500


class DiagnosticsDock(QDockWidget):
    """
    Bottom dock tailing the rotating log file (see utils.logging_setup).
    While "Follow" is checked the file is polled and the view is only
    rebuilt when its size or mtime moved; "Tail Log" always reloads.
    """

    def __init__(self, parent=None):
        super().__init__("Diagnostics", parent)
        self.setObjectName("DiagnosticsDock")
        self.setAllowedAreas(Qt.BottomDockWidgetArea | Qt.TopDockWidgetArea)
        self.setFeatures(QDockWidget.DockWidgetMovable | QDockWidget.DockWidgetClosable | QDockWidget.DockWidgetFloatable)

        self._log_file = log_file_path()
        self._seen = None

        self._view = QPlainTextEdit()
        self._view.setReadOnly(True)
        self._view.setLineWrapMode(QPlainTextEdit.NoWrap)
        self._view.setMaximumBlockCount(2000)

        self._follow = QCheckBox("Follow")
        self._follow.setChecked(True)
        btn_tail = QPushButton("Tail Log")

        bar = QHBoxLayout()
        bar.addWidget(QLabel(f"Log: {self._log_file or '—'}"), 1)
        bar.addWidget(self._follow)
        bar.addWidget(btn_tail)

        body = QWidget()
        lay = QVBoxLayout(body)
        lay.setContentsMargins(4, 4, 4, 4)
        lay.addLayout(bar)
        lay.addWidget(self._view, 1)
        self.setWidget(body)

        self._timer = QTimer(self)
        self._timer.setInterval(POLL_MS)
        self._timer.timeout.connect(self._poll)

        btn_tail.clicked.connect(self.reload)
        self._follow.toggled.connect(self._on_follow_toggled)

        self.reload()
        self._timer.start()

    def _on_follow_toggled(self, on: bool):
        if on:
            self._poll()
            self._timer.start()
        else:
            self._timer.stop()

    def _poll(self):
        if log_signature(self._log_file) != self._seen:
            self.reload()

    def reload(self):
        self._seen = log_signature(self._log_file)
        self._view.setPlainText(tail_log(self._log_file))
        self._view.moveCursor(QTextCursor.End)
