from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from bpedit.domain.errors import FileReadError, FileWriteError
from bpedit.domain.interfaces import IFileService

_LOGGER = logging.getLogger(__name__)


class FileService(IFileService):
    """UTF-8 reads and atomic writes for blueprint files."""

    def read_text(self, path: Path) -> str:
        try:
            # newline="" keeps CRLF files byte-identical on save
            with path.open("r", encoding="utf-8", newline="") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(path, str(e)) from e
        _LOGGER.debug("Read %d chars from %s", len(text), path)
        return text

    def write_text_atomic(self, path: Path, text: str) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise FileWriteError(path, sf.errorString() or "cannot open for write")
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            raise FileWriteError(path, sf.errorString() or "commit failed")
        _LOGGER.debug("Wrote %d chars to %s", len(text), path)
