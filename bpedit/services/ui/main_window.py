from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from PyQt6.QtCore import QByteArray, Qt, pyqtSignal
from PyQt6.QtGui import QAction, QCloseEvent, QFont, QFontDatabase, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QMenu,
    QPlainTextEdit,
    QStatusBar,
    QToolBar,
    QWidget,
)

from bpedit.domain.commands import EditorCommand
from bpedit.domain.interfaces import ISettingsService
from bpedit.utils.constants import APP_NAME

_BLOCK_SEPARATOR = "\u2029"


def newline_of(text: str) -> str:
    """Line ending of ``text``: CRLF if it has any, else CR, else LF."""
    if "\r\n" in text:
        return "\r\n"
    if "\r" in text:
        return "\r"
    return "\n"


class MainWindow(QMainWindow):
    """
    Thin PyQt window: shows the blueprint text and forwards intents.

    It never decides anything about the document. Edits are reported through
    ``content_changed`` and user commands through ``command_requested``; the
    attached DocumentController pushes state back via the IEditorSurface methods.
    """

    command_requested = pyqtSignal(object)  # EditorCommand
    content_changed = pyqtSignal()
    recent_requested = pyqtSignal(str)
    recents_clear_requested = pyqtSignal()
    file_dropped = pyqtSignal(object)  # Path

    def __init__(
        self,
        settings: ISettingsService,
        *,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(800, 600)

        self.settings = settings
        self.controller = None
        self._newline = "\n"

        self.editor = QPlainTextEdit(self)
        self.editor.setObjectName("editor")
        font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        font.setStyleHint(QFont.StyleHint.Monospace)
        self.editor.setFont(font)
        self.editor.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.editor.setTabStopDistance(2 * self.editor.fontMetrics().horizontalAdvance(" "))
        self.setCentralWidget(self.editor)

        # Fires for user edits only; programmatic loads block it.
        self.editor.textChanged.connect(self.content_changed)

        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

        self.setAcceptDrops(True)

    # ---------- Wiring ----------
    def attach_controller(self, controller) -> None:
        """Connect view signals to a DocumentController and let it push the initial state."""
        self.controller = controller
        self.command_requested.connect(controller.handle)
        self.content_changed.connect(controller.mark_dirty)
        self.recent_requested.connect(controller.open_recent)
        self.recents_clear_requested.connect(controller.clear_recents)
        self.file_dropped.connect(controller.open_document)
        controller.start()

    # ---------- UI creation ----------
    def _build_actions(self):
        def command_action(text: str, command: EditorCommand, shortcut=None) -> QAction:
            act = QAction(text, self)
            if shortcut is not None:
                act.setShortcut(shortcut)
            act.triggered.connect(lambda chk=False, c=command: self.command_requested.emit(c))
            return act

        self.act_new = command_action("New", EditorCommand.NEW, QKeySequence.StandardKey.New)
        self.act_open = command_action("Open…", EditorCommand.OPEN, QKeySequence.StandardKey.Open)
        self.act_import = command_action("Import from URL…", EditorCommand.IMPORT)
        self.act_save = command_action("Save", EditorCommand.SAVE, QKeySequence.StandardKey.Save)
        self.act_save_as = command_action(
            "Save As…", EditorCommand.SAVE_AS, QKeySequence("Ctrl+Shift+S")
        )
        self.act_save.setEnabled(False)
        self.act_save_as.setEnabled(False)

        self.act_quit = QAction("Quit", self)
        self.act_quit.setShortcut(QKeySequence.StandardKey.Quit)
        self.act_quit.setMenuRole(QAction.MenuRole.QuitRole)
        self.act_quit.triggered.connect(self.close)

        self.recent_menu = QMenu("Open Recent", self)

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setObjectName("main-toolbar")
        tb.setMovable(False)
        for a in (self.act_new, self.act_open, self.act_import, self.act_save):
            tb.addAction(a)
        self.addToolBar(tb)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&Blueprints")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addMenu(self.recent_menu)
        filem.addAction(self.act_import)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_quit)
        self.set_recents([])

    # ---------- IEditorSurface ----------
    def get_text(self) -> str:
        # toPlainText() folds NBSP and U+2028 into plain whitespace; the raw text
        # keeps them and marks line breaks with U+2029.
        raw = self.editor.document().toRawText()
        return raw.replace(_BLOCK_SEPARATOR, self._newline)

    def load_content(self, text: str) -> None:
        self._newline = newline_of(text)
        self.editor.blockSignals(True)
        try:
            self.editor.setPlainText(text)
        finally:
            self.editor.blockSignals(False)

    def set_save_enabled(self, enabled: bool) -> None:
        self.act_save.setEnabled(enabled)

    def set_save_as_enabled(self, enabled: bool) -> None:
        self.act_save_as.setEnabled(enabled)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def set_recents(self, items: list[str]) -> None:
        self.recent_menu.clear()
        if not items:
            na = QAction("(empty)", self)
            na.setEnabled(False)
            self.recent_menu.addAction(na)
            return
        for p in items:
            self.recent_menu.addAction(
                QAction(p, self, triggered=lambda chk=False, x=p: self.recent_requested.emit(x))
            )
        self.recent_menu.addSeparator()
        clear = QAction("Clear Recent", self)
        clear.triggered.connect(lambda chk=False: self.recents_clear_requested.emit())
        self.recent_menu.addAction(clear)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)

    @contextmanager
    def busy(self) -> Iterator[None]:
        QApplication.setOverrideCursor(Qt.CursorShape.WaitCursor)
        self.editor.setReadOnly(True)
        try:
            yield
        finally:
            self.editor.setReadOnly(False)
            QApplication.restoreOverrideCursor()

    def dialog_parent(self) -> QWidget:
        return self

    # ---------- DnD ----------
    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        urls = e.mimeData().urls()
        if not urls:
            return
        local = urls[0].toLocalFile()
        if local:
            self.file_dropped.emit(Path(local))

    # ---------- Close ----------
    def closeEvent(self, event: QCloseEvent):
        if self.controller is not None and not self.controller.on_quit_requested():
            event.ignore()
            return
        self.settings.set_geometry(bytes(self.saveGeometry()))
        event.accept()
