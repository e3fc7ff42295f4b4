"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chessduel.config import AppSettings, parse_args

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Send package logs to stderr. Repeated calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_LOG_FORMAT)
    logging.getLogger("chessduel").setLevel(level)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chessduel.ui.styles.theme import APP_STYLE

    app.setApplicationName("chessduel")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chessduel.ui.main_window import MainWindow

    argv = sys.argv if argv is None else argv
    settings: AppSettings = parse_args(argv[1:])
    configure_logging(settings.log_level_value)
    _LOGGER.debug("Settings: %s", settings)

    app = QApplication(argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()
