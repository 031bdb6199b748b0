from __future__ import annotations

from pathlib import Path

import pytest
from PyQt6.QtWidgets import QFileDialog, QInputDialog, QMessageBox

from bpedit.services.ui.adapters import QtFileDialogService, QtMessageService


@pytest.mark.parametrize(
    "button, expected",
    [(QMessageBox.StandardButton.Yes, True), (QMessageBox.StandardButton.No, False)],
)
def test_ask_maps_yes_no(monkeypatch, qapp, button, expected):
    monkeypatch.setattr(QMessageBox, "question", lambda *a, **k: button)
    assert QtMessageService().ask(None, "t", "q") is expected


def test_error_uses_critical_box(monkeypatch, qapp):
    seen = []
    monkeypatch.setattr(QMessageBox, "critical", lambda parent, title, text: seen.append((title, text)))
    QtMessageService().error(None, "Save Error", "disk full")
    assert seen == [("Save Error", "disk full")]


def test_open_file_returns_path_or_none(monkeypatch, qapp, tmp_path):
    svc = QtFileDialogService()
    monkeypatch.setattr(QFileDialog, "getOpenFileName", lambda *a, **k: (str(tmp_path / "a.json"), ""))
    assert svc.get_open_file(None, "Open", None, "*.json") == tmp_path / "a.json"

    monkeypatch.setattr(QFileDialog, "getOpenFileName", lambda *a, **k: ("", ""))
    assert svc.get_open_file(None, "Open", None, "*.json") is None


def test_save_file_passes_start_path(monkeypatch, qapp):
    calls = []

    def fake(parent, caption, start, filt):
        calls.append(start)
        return ("/tmp/out.json", "")

    monkeypatch.setattr(QFileDialog, "getSaveFileName", fake)
    assert QtFileDialogService().get_save_file(None, "Save", "my-blueprint.json", "*.json") == Path(
        "/tmp/out.json"
    )
    assert calls == ["my-blueprint.json"]


def test_get_text_cancel_and_accept(monkeypatch, qapp):
    svc = QtFileDialogService()
    monkeypatch.setattr(QInputDialog, "getText", lambda *a, **k: ("https://x.test", True))
    assert svc.get_text(None, "Import", "URL:", "https://default.test") == "https://x.test"

    monkeypatch.setattr(QInputDialog, "getText", lambda *a, **k: ("ignored", False))
    assert svc.get_text(None, "Import", "URL:") is None
