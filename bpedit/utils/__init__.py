"""App constants and utilities."""

from .constants import (
    APP_DIR,
    APP_NAME,
    APP_ORG,
    BLUEPRINT_FILTER,
    DEFAULT_BLUEPRINT_NAME,
    DEFAULT_IMPORT_TIMEOUT,
    DEFAULT_IMPORT_URL,
    MAX_RECENTS,
    SETTINGS_GEOMETRY,
    SETTINGS_RECENTS,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "APP_DIR",
    "BLUEPRINT_FILTER",
    "DEFAULT_BLUEPRINT_NAME",
    "DEFAULT_IMPORT_URL",
    "DEFAULT_IMPORT_TIMEOUT",
    "SETTINGS_GEOMETRY",
    "SETTINGS_RECENTS",
    "MAX_RECENTS",
]
