from __future__ import annotations

from pathlib import Path

from bpedit.domain.interfaces import ISettingsService
from bpedit.utils.constants import MAX_RECENTS


class RecentDocuments:
    """Most-recent-first list of opened blueprints, persisted through the settings service."""

    def __init__(self, settings: ISettingsService, *, limit: int = MAX_RECENTS) -> None:
        self._settings = settings
        self._limit = limit
        self._items: list[str] = settings.get_recent()[:limit]

    def items(self) -> list[str]:
        return list(self._items)

    def add(self, path: Path) -> None:
        s = str(path)
        if s in self._items:
            self._items.remove(s)
        self._items.insert(0, s)
        self._items = self._items[: self._limit]
        self._settings.set_recent(self._items)

    def remove(self, path: Path) -> None:
        s = str(path)
        if s in self._items:
            self._items.remove(s)
            self._settings.set_recent(self._items)

    def clear(self) -> None:
        self._items = []
        self._settings.set_recent([])
