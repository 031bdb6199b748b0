from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from PyQt6.QtCore import QEvent, QObject
from PyQt6.QtGui import QFileOpenEvent
from PyQt6.QtWidgets import QApplication

from bpedit.di.container import Container
from bpedit.services.config.app_config import build_app_config
from bpedit.utils.constants import APP_NAME, APP_ORG
from bpedit.utils.logging import setup_logging

_LOGGER = logging.getLogger(__name__)


class FileOpenFilter(QObject):
    """Routes the platform "open this file" event (macOS Finder, dock) to a callback."""

    def __init__(self, on_open: Callable[[Path], object], parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._on_open = on_open

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.FileOpen and isinstance(event, QFileOpenEvent):
            local = event.file()
            if local:
                self._on_open(Path(local))
                return True
        return super().eventFilter(obj, event)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps logging and Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = build_app_config()
    log_path = setup_logging(config.log_level())
    _LOGGER.info("Starting %s %s (log: %s)", APP_NAME, config.app_version(), log_path)
    if config.loaded_from is not None:
        _LOGGER.info("Config loaded from %s", config.loaded_from)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional blueprint path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)

    file_open = FileOpenFilter(win.controller.open_document, app)
    app.installEventFilter(file_open)

    win.show()
    rc = app.exec()
    _LOGGER.info("Exiting with code %s", rc)
    return rc
