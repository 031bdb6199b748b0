"""Concrete service implementations."""

from .blueprint_fetcher import BlueprintFetcher
from .file_service import FileService
from .recent_documents import RecentDocuments
from .settings_service import SettingsService

__all__ = ["BlueprintFetcher", "FileService", "RecentDocuments", "SettingsService"]
