from __future__ import annotations

import logging

import pytest

from bpedit.utils.logging import get_log_path, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    httpx_level = logging.getLogger("httpx").level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)


def test_setup_logging_writes_to_rotating_file(tmp_path):
    path = setup_logging("INFO", log_dir=tmp_path, console=False)
    assert path == tmp_path / "bpedit.log"
    assert get_log_path() == path

    logging.getLogger("bpedit.test").info("hello blueprint")
    for h in logging.getLogger().handlers:
        h.flush()
    line = path.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert "| INFO     | bpedit.test | hello blueprint" in line


def test_setup_logging_accepts_level_names_and_quiets_http(tmp_path):
    setup_logging("debug", log_dir=tmp_path, console=False)
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.DEBUG

    setup_logging(logging.INFO, log_dir=tmp_path, console=False)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_unknown_level_name_falls_back_to_info(tmp_path):
    setup_logging("LOUD", log_dir=tmp_path, console=False)
    assert logging.getLogger().level == logging.INFO
