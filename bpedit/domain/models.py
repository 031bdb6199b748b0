from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Document:
    path: Path | None
    content: str
    dirty: bool = False

    @property
    def display_name(self) -> str:
        return self.path.name if self.path else "Untitled"


@dataclass(frozen=True)
class Affordances:
    """Enabled state of the Save / Save As commands."""

    save: bool = False
    save_as: bool = False
