from __future__ import annotations

from enum import Enum


class EditorCommand(Enum):
    """Discrete user intents sent from the editor surface to the document controller."""

    NEW = "new"
    OPEN = "open"
    IMPORT = "import"
    SAVE = "save"
    SAVE_AS = "save-as"
