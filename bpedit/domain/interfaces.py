from __future__ import annotations
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol, Iterable, Any


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_recent(self) -> list[str]: ...
    def set_recent(self, recent: Iterable[str]) -> None: ...


class IBlueprintFetcher(Protocol):
    """Fetch a blueprint over the network and return it as pretty-printed JSON text."""

    def fetch(self, url: str) -> str: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_float(
        self, section: str, key: str, default: float | None = None
    ) -> float | None: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    """Typed accessors over the INI configuration."""

    def import_default_url(self) -> str: ...
    def import_timeout(self) -> float: ...
    def default_blueprint_name(self) -> str: ...
    def log_level(self) -> str: ...


class IEditorSurface(Protocol):
    """What the document controller needs from the view (implemented by the Qt MainWindow)."""

    def get_text(self) -> str: ...
    def load_content(self, text: str) -> None: ...

    def set_save_enabled(self, enabled: bool) -> None: ...
    def set_save_as_enabled(self, enabled: bool) -> None: ...
    def set_title(self, title: str) -> None: ...
    def set_recents(self, items: list[str]) -> None: ...

    def show_status(self, text: str, msec: int = 3000) -> None: ...
    def busy(self) -> AbstractContextManager[None]:
        """Signal a long-running operation (e.g. a network import) while the block runs."""
        ...

    def dialog_parent(self) -> Any | None: ...
