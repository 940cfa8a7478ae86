# main.py
from __future__ import annotations
import sys
import logging
from typing import List

from PySide6.QtWidgets import QApplication, QMessageBox

from app.config import AppConfig, load_config
from ui.main_window import MainWindow


def setup_logging(config: AppConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    file_error = None
    try:
        config.log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_path, encoding="utf-8"))
    except OSError as e:
        file_error = e

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=handlers,
    )
    if file_error is not None:
        logging.warning("Cannot write log file %s: %s", config.log_path, file_error)

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.exception("Unhandled exception", exc_info=(exctype, value, tb))
        try:
            QMessageBox.critical(
                None, "Application Error", f"{exctype.__name__}: {value}"
            )
        except Exception:
            pass
        sys.exit(1)

    sys.excepthook = excepthook
    return handlers


def main() -> int:
    # config problems are reported once logging is up
    problems: List[str] = []
    config = load_config(problems=problems)
    setup_logging(config)
    for message in problems:
        logging.getLogger("app.config").warning(message)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Typing Speed Test")
    app.setOrganizationName("Fireteam Forerunner")

    win = MainWindow(config)
    win.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
