from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from bpedit.domain.commands import EditorCommand
from bpedit.domain.errors import (
    BlueprintImportError,
    FileReadError,
    FileWriteError,
    UserCancelled,
)
from bpedit.domain.interfaces import IBlueprintFetcher, IEditorSurface, IFileService
from bpedit.domain.models import Affordances, Document
from bpedit.services.recent_documents import RecentDocuments
from bpedit.services.ui.ports.dialogs import IFileDialogService
from bpedit.services.ui.ports.messages import IMessageService
from bpedit.utils.constants import (
    ACTION_IMPORT,
    ACTION_NEW,
    ACTION_OPEN,
    ACTION_QUIT,
    APP_NAME,
    BLUEPRINT_FILTER,
    DEFAULT_BLUEPRINT_NAME,
    DEFAULT_IMPORT_URL,
)

_LOGGER = logging.getLogger(__name__)


class DocumentController:
    """
    Owns the single open blueprint and decides when it may be discarded.

    The view is passive: it reports edits (``mark_dirty``) and commands
    (``handle``), and is told what to display. All file and network side
    effects go through the injected services. A failed open, import or save
    leaves the document, its dirty flag and the Save/Save As affordances
    exactly as they were.
    """

    def __init__(
        self,
        view: IEditorSurface,
        files: IFileService,
        fetcher: IBlueprintFetcher,
        recents: RecentDocuments,
        messages: IMessageService,
        dialogs: IFileDialogService,
        *,
        default_import_url: str = DEFAULT_IMPORT_URL,
        default_name: str = DEFAULT_BLUEPRINT_NAME,
        app_title: str = APP_NAME,
    ) -> None:
        self.view = view
        self.files = files
        self.fetcher = fetcher
        self.recents = recents
        self.messages = messages
        self.dialogs = dialogs
        self.default_import_url = default_import_url
        self.default_name = default_name
        self.app_title = app_title

        self.doc = Document(path=None, content="")
        self.affordances = Affordances()

        self._handlers: dict[EditorCommand, Callable[[], bool]] = {
            EditorCommand.NEW: self.new_document,
            EditorCommand.OPEN: self.open_document,
            EditorCommand.IMPORT: self.import_from_url,
            EditorCommand.SAVE: self._save_or_save_as,
            EditorCommand.SAVE_AS: self.save_document_as,
        }

    def start(self) -> None:
        """Push the initial Clean(no path) state to the view."""
        self._apply_affordances(save=False, save_as=False)
        self.view.set_recents(self.recents.items())
        self._refresh_title()

    # ---------- Command channel ----------

    def handle(self, command: EditorCommand) -> bool:
        _LOGGER.debug("Command received: %s", command.value)
        return self._handlers[command]()

    # ---------- Discard guard ----------

    def confirm_discard(self, action: str) -> bool:
        if not self.doc.dirty:
            return True
        ok = self.messages.ask(
            self.view.dialog_parent(),
            "Discard unsaved changes?",
            f"You have unsaved changes. Are you sure you want to {action}?",
        )
        _LOGGER.info("Discard before '%s': %s", action, "confirmed" if ok else "declined")
        return ok

    def on_quit_requested(self) -> bool:
        return self.confirm_discard(ACTION_QUIT)

    # ---------- Lifecycle ----------

    def new_document(self) -> bool:
        if not self.confirm_discard(ACTION_NEW):
            return False
        self._load(Document(path=None, content=""))
        self._apply_affordances(save=False, save_as=True)
        _LOGGER.info("New blueprint")
        return True

    def open_document(self, path: Path | None = None) -> bool:
        if not self.confirm_discard(ACTION_OPEN):
            return False
        try:
            target = path or self._ask_open_path()
            text = self.files.read_text(target)
        except UserCancelled:
            _LOGGER.debug("Open cancelled")
            return False
        except FileReadError as e:
            _LOGGER.error("Open failed: %s", e)
            self.messages.error(
                self.view.dialog_parent(), "Open Error", f"Failed to open blueprint:\n{e.reason}"
            )
            return False

        self._remember(target)
        self._load(Document(path=target, content=text))
        self._apply_affordances(save=True, save_as=True)
        self.view.show_status(f"Opened: {target}")
        _LOGGER.info("Opened %s", target)
        return True

    def open_recent(self, path_str: str) -> bool:
        p = Path(path_str)
        if not p.exists():
            self.messages.warning(self.view.dialog_parent(), "Missing", f"File not found:\n{p}")
            self.recents.remove(p)
            self.view.set_recents(self.recents.items())
            return False
        return self.open_document(p)

    def clear_recents(self) -> None:
        self.recents.clear()
        self.view.set_recents(self.recents.items())
        _LOGGER.info("Cleared recent blueprints")

    def import_from_url(self) -> bool:
        if not self.confirm_discard(ACTION_IMPORT):
            return False
        try:
            url = self._ask_url()
            with self.view.busy():
                text = self.fetcher.fetch(url)
        except UserCancelled:
            _LOGGER.debug("Import cancelled")
            return False
        except BlueprintImportError as e:
            _LOGGER.error("Import failed: %s", e)
            self.messages.error(
                self.view.dialog_parent(),
                "Import Error",
                f"Failed to import blueprint from\n{e.url}\n\n{e.reason}",
            )
            return False

        # Imported blueprints have no local file until saved.
        self._load(Document(path=None, content=text))
        self._apply_affordances(save=False, save_as=True)
        self.view.show_status(f"Imported: {url}")
        _LOGGER.info("Imported blueprint from %s", url)
        return True

    def save_document(self) -> bool:
        if self.doc.path is None:
            _LOGGER.warning("Save requested for a blueprint without a path; use Save As")
            return False

        # Content is not mirrored on every keystroke. A clean buffer still holds
        # exactly the loaded text, which the editor widget may not reproduce byte for byte.
        text = self.view.get_text() if self.doc.dirty else self.doc.content
        try:
            self.files.write_text_atomic(self.doc.path, text)
        except FileWriteError as e:
            _LOGGER.error("Save failed: %s", e)
            self.messages.error(
                self.view.dialog_parent(), "Save Error", f"Failed to save blueprint:\n{e.reason}"
            )
            return False

        self.doc.content = text
        self.doc.dirty = False
        self._apply_affordances(save=False, save_as=True)
        self._refresh_title()
        self.view.show_status(f"Saved: {self.doc.path}")
        _LOGGER.info("Saved %s", self.doc.path)
        return True

    def save_document_as(self) -> bool:
        start = str(self.doc.path) if self.doc.path else self.default_name
        try:
            target = self._ask_save_path(start)
        except UserCancelled:
            _LOGGER.debug("Save As cancelled")
            return False

        previous = self.doc.path
        self.doc.path = target
        if not self.save_document():
            self.doc.path = previous
            return False
        self._remember(target)
        return True

    def mark_dirty(self) -> None:
        was_dirty = self.doc.dirty
        self.doc.dirty = True
        self._apply_affordances(save=True, save_as=True)
        if not was_dirty:
            _LOGGER.debug("Blueprint marked dirty")
            self._refresh_title()

    # ---------- Prompts ----------

    def _ask_open_path(self) -> Path:
        path = self.dialogs.get_open_file(
            self.view.dialog_parent(), "Open Blueprint", None, BLUEPRINT_FILTER
        )
        if path is None:
            raise UserCancelled("open")
        return path

    def _ask_save_path(self, start: str) -> Path:
        path = self.dialogs.get_save_file(
            self.view.dialog_parent(), "Save Blueprint As", start, BLUEPRINT_FILTER
        )
        if path is None:
            raise UserCancelled("save as")
        return path

    def _ask_url(self) -> str:
        url = self.dialogs.get_text(
            self.view.dialog_parent(), "Import from URL", "URL:", self.default_import_url
        )
        url = (url or "").strip()
        if not url:
            raise UserCancelled("import")
        return url

    # ---------- Helpers ----------

    def _save_or_save_as(self) -> bool:
        return self.save_document() if self.doc.path else self.save_document_as()

    def _load(self, doc: Document) -> None:
        self.doc = doc
        self.view.load_content(doc.content)
        self._refresh_title()

    def _remember(self, path: Path) -> None:
        self.recents.add(path)
        self.view.set_recents(self.recents.items())

    def _apply_affordances(self, *, save: bool, save_as: bool) -> None:
        # Plain Save needs somewhere to write.
        self.affordances = Affordances(save=save and self.doc.path is not None, save_as=save_as)
        self.view.set_save_enabled(self.affordances.save)
        self.view.set_save_as_enabled(self.affordances.save_as)

    def _refresh_title(self) -> None:
        star = " •" if self.doc.dirty else ""
        self.view.set_title(f"{self.doc.display_name}{star} — {self.app_title}")
