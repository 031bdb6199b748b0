from __future__ import annotations

from pathlib import Path


class BlueprintEditorError(Exception):
    """Base class for recoverable editor failures; none of them are fatal."""


class FileReadError(BlueprintEditorError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path
        self.reason = reason


class FileWriteError(BlueprintEditorError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason


class BlueprintImportError(BlueprintEditorError):
    """Fetching a blueprint failed, or the response body was not usable JSON."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to import {url}: {reason}")
        self.url = url
        self.reason = reason


class UserCancelled(BlueprintEditorError):
    """The user dismissed a prompt. A normal abort path, never reported as an error."""
