from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QSettings

from bpedit.domain.interfaces import (
    IAppConfig,
    IBlueprintFetcher,
    IFileService,
    ISettingsService,
)
from bpedit.services.blueprint_fetcher import BlueprintFetcher
from bpedit.services.config.app_config import build_app_config
from bpedit.services.file_service import FileService
from bpedit.services.recent_documents import RecentDocuments
from bpedit.services.settings_service import SettingsService
from bpedit.services.ui.adapters import QtFileDialogService, QtMessageService
from bpedit.services.ui.main_window import MainWindow
from bpedit.services.ui.ports import IFileDialogService, IMessageService
from bpedit.services.ui.presenters import DocumentController
from bpedit.utils.constants import APP_DIR, APP_NAME, APP_ORG

_LOGGER = logging.getLogger(__name__)


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the MainWindow and attaches its DocumentController
    """

    def __init__(
        self,
        config: IAppConfig | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        fetcher: IBlueprintFetcher | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: IAppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.fetcher: IBlueprintFetcher = fetcher or BlueprintFetcher(
            timeout=self.config.import_timeout()
        )
        self.recents = RecentDocuments(self.settings_service)

        # UI service ports (Qt-backed adapters by default)
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: IAppConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_DIR,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(config=config, qsettings=qsettings)

    # ---------- UI factories ----------

    def build_controller(self, view, *, app_title: str = APP_NAME) -> DocumentController:
        return DocumentController(
            view=view,
            files=self.file_service,
            fetcher=self.fetcher,
            recents=self.recents,
            messages=self.messages,
            dialogs=self.dialogs,
            default_import_url=self.config.import_default_url(),
            default_name=self.config.default_blueprint_name(),
            app_title=app_title,
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """
        Create the Qt MainWindow, attach a DocumentController, and optionally
        open a starting blueprint.
        """
        window = MainWindow(settings=self.settings_service, app_title=app_title)
        controller = self.build_controller(window, app_title=app_title)
        window.attach_controller(controller)
        if start_path is not None:
            _LOGGER.info("Opening start blueprint %s", start_path)
            controller.open_document(start_path)
        return window
