"""Shared pytest configuration for Promptbook tests."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Qt widgets must not need a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def _isolate_user_dirs(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests from writing into the user's real settings and log directories."""

    home = tmp_path / "home"
    home.mkdir()
    settings_dir = tmp_path / "settings"
    settings_dir.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("PROMPTBOOK_SETTINGS_DIR", str(settings_dir))
    monkeypatch.delenv("PROMPTBOOK_DEBUG", raising=False)
    yield


@pytest.fixture
def restore_root_logging():
    """Undo handler changes made by logging setup inside a test."""

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
