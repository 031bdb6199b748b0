from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from bpedit.domain.interfaces import IAppConfig
from bpedit.services.config.ini_config_service import IniConfigService
from bpedit.utils.constants import (
    DEFAULT_BLUEPRINT_NAME,
    DEFAULT_IMPORT_TIMEOUT,
    DEFAULT_IMPORT_URL,
)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # bpedit/services/config/app_config.py -> parents[3] = repository root
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Adapter that wraps IniConfigService with typed, defaulted accessors.

    Recognised keys:
      [import]  url, timeout
      [editor]  default_name
      [logging] level
    """

    ini: IniConfigService

    def import_default_url(self) -> str:
        url = (self.ini.get("import", "url") or "").strip()
        return url or DEFAULT_IMPORT_URL

    def import_timeout(self) -> float:
        timeout = self.ini.get_float("import", "timeout", DEFAULT_IMPORT_TIMEOUT)
        if timeout is None or timeout <= 0:
            return DEFAULT_IMPORT_TIMEOUT
        return timeout

    def default_blueprint_name(self) -> str:
        name = (self.ini.get("editor", "default_name") or "").strip()
        return name or DEFAULT_BLUEPRINT_NAME

    def log_level(self) -> str:
        level = (self.ini.get("logging", "level") or "").strip().upper()
        return level if level in _LOG_LEVELS else "INFO"

    # ---- delegate IniConfigService methods used by the app ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_float(self, section: str, key: str, default: float | None = None) -> float | None:
        return self.ini.get_float(section, key, default)

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    return AppConfig(ini=IniConfigService(explicit_path=explicit_ini, project_root=root))
