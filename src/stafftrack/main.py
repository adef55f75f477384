# Rev 0.1.0

# src/stafftrack/main.py  (Rev 0.1.0)
import sys
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from .app_context import AppContext
from .ui.main_window import MainWindow
from .utils.config import load_settings
from .utils.logging_setup import setup_logging
from .utils.paths import APP_NAME, ensure_dirs
from .viewmodels.staff_viewmodel import StaffViewModel


def main():
    app = QApplication(sys.argv)
    QCoreApplication.setApplicationName(APP_NAME)

    ensure_dirs()
    logfile = setup_logging(APP_NAME)
    print(f"[logging] Writing to: {logfile}")

    # --- wiring ---
    vm = StaffViewModel(AppContext.create())
    win = MainWindow(vm, settings=load_settings())
    win.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
