from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path

# Headless by default; must be set before any Qt GUI import.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from bpedit.services.config.app_config import AppConfig
from bpedit.services.config.ini_config_service import IniConfigService
from bpedit.services.file_service import FileService
from bpedit.services.recent_documents import RecentDocuments
from bpedit.services.settings_service import SettingsService


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Fakes shared by controller / window tests ---


class FakeMessages:
    """Records every message; `answer` drives yes/no questions."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.asked: list[tuple[str, str]] = []
        self.errors: list[tuple[str, str]] = []
        self.warnings: list[tuple[str, str]] = []
        self.infos: list[tuple[str, str]] = []

    def info(self, parent, title: str, text: str) -> None:
        self.infos.append((title, text))

    def warning(self, parent, title: str, text: str) -> None:
        self.warnings.append((title, text))

    def error(self, parent, title: str, text: str) -> None:
        self.errors.append((title, text))

    def ask(self, parent, title: str, text: str) -> bool:
        self.asked.append((title, text))
        return self.answer


class FakeDialogs:
    """Canned answers for file pickers and the URL prompt; None means cancelled."""

    def __init__(
        self,
        open_path: Path | None = None,
        save_path: Path | None = None,
        url: str | None = None,
    ) -> None:
        self.open_path = open_path
        self.save_path = save_path
        self.url = url
        self.open_calls: list[tuple[str, str | None, str]] = []
        self.save_calls: list[tuple[str, str | None, str]] = []
        self.text_calls: list[tuple[str, str, str]] = []

    def get_open_file(self, parent, caption, start_dir, filter_str):
        self.open_calls.append((caption, start_dir, filter_str))
        return self.open_path

    def get_save_file(self, parent, caption, start_path, filter_str):
        self.save_calls.append((caption, start_path, filter_str))
        return self.save_path

    def get_text(self, parent, caption, label, default=""):
        self.text_calls.append((caption, label, default))
        return self.url


class FakeView:
    """In-memory IEditorSurface."""

    def __init__(self) -> None:
        self.text = ""
        self.loads: list[str] = []
        self.save_enabled: bool | None = None
        self.save_as_enabled: bool | None = None
        self.title = ""
        self.recents: list[str] = []
        self.statuses: list[str] = []
        self.busy_calls = 0

    def get_text(self) -> str:
        return self.text

    def load_content(self, text: str) -> None:
        self.text = text
        self.loads.append(text)

    def set_save_enabled(self, enabled: bool) -> None:
        self.save_enabled = enabled

    def set_save_as_enabled(self, enabled: bool) -> None:
        self.save_as_enabled = enabled

    def set_title(self, title: str) -> None:
        self.title = title

    def set_recents(self, items: list[str]) -> None:
        self.recents = list(items)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statuses.append(text)

    @contextmanager
    def busy(self):
        self.busy_calls += 1
        yield

    def dialog_parent(self):
        return None


class FakeFetcher:
    def __init__(self, text: str = "{}", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.urls: list[str] = []

    def fetch(self, url: str) -> str:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.text


class MemorySettings:
    def __init__(self) -> None:
        self.geometry: bytes | None = None
        self.recent: list[str] = []

    def get_geometry(self) -> bytes | None:
        return self.geometry

    def set_geometry(self, blob: bytes) -> None:
        self.geometry = blob

    def get_recent(self) -> list[str]:
        return list(self.recent)

    def set_recent(self, recent) -> None:
        self.recent = list(recent)


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def memory_settings() -> MemorySettings:
    return MemorySettings()


@pytest.fixture()
def recents(memory_settings: MemorySettings) -> RecentDocuments:
    return RecentDocuments(memory_settings)


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    ini = tmp_path / "config.ini"
    ini.write_text(
        "[import]\nurl = https://example.test/blueprint.json\ntimeout = 5\n",
        encoding="utf-8",
    )
    return AppConfig(ini=IniConfigService(explicit_path=ini))


@pytest.fixture()
def fake_view() -> FakeView:
    return FakeView()


@pytest.fixture()
def fake_messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def fake_dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()
