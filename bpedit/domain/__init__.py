"""Domain layer: interfaces, errors, commands and simple models (dataclasses)."""

from .commands import EditorCommand
from .errors import (
    BlueprintEditorError,
    BlueprintImportError,
    FileReadError,
    FileWriteError,
    UserCancelled,
)
from .interfaces import (
    IAppConfig,
    IBlueprintFetcher,
    IConfigService,
    IEditorSurface,
    IFileService,
    ISettingsService,
)
from .models import Affordances, Document

__all__ = [
    "IFileService",
    "ISettingsService",
    "IBlueprintFetcher",
    "IConfigService",
    "IAppConfig",
    "IEditorSurface",
    "EditorCommand",
    "BlueprintEditorError",
    "FileReadError",
    "FileWriteError",
    "BlueprintImportError",
    "UserCancelled",
    "Affordances",
    "Document",
]
