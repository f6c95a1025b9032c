#!/usr/bin/env python3
"""Blind Quote Detail Editor - Main Entry Point."""

import logging
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from PyQt6.QtWidgets import QApplication, QMessageBox
from PyQt6.QtCore import Qt

from config import APP_NAME, LOG_FORMAT, LOG_LEVEL
from database import init_db, seed_database
from ui import MainWindow
from ui.styles import MAIN_STYLE

logger = logging.getLogger(__name__)


def _handle_uncaught(exc_type, exc_value, exc_traceback):
    """Top-level handler for programming errors such as pricing faults."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.critical("Unhandled error", exc_info=(exc_type, exc_value, exc_traceback))
    if QApplication.instance() is not None:
        QMessageBox.critical(None, "Error", f"{exc_type.__name__}: {exc_value}")


def main():
    """Main application entry point."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    sys.excepthook = _handle_uncaught

    init_db()
    seed_database()

    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setStyle('Fusion')  # Modern cross-platform style
    app.setStyleSheet(MAIN_STYLE)

    # Create and show main window
    window = MainWindow()
    window.show()

    # Run event loop
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
