# main.py
from __future__ import annotations
import sys
import logging

from PySide6.QtWidgets import QApplication, QMessageBox

from core.patterns import default_patterns
from services.progression import ProgressionLedger
from services.session import TrainerSession
from utils.db_helper import DB_PATH
from utils.file_handler import ensure_app_files, load_phrases
from ui.main_window import MainWindow


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler("app.log", encoding="utf-8"),
        ],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))
        try:
            QMessageBox.critical(
                None, "Application Error", f"{exctype.__name__}: {value}"
            )
        except Exception:
            logging.exception("Could not show the error dialog")
        sys.exit(1)

    sys.excepthook = excepthook


def build_session() -> TrainerSession:
    ensure_app_files()
    return TrainerSession(
        phrases=load_phrases(),
        patterns=default_patterns(),
        ledger=ProgressionLedger.load(DB_PATH),
    )


def main() -> int:
    setup_logging()

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Type Wiz")
    app.setOrganizationName("Type Wiz")

    win = MainWindow(build_session())
    win.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
