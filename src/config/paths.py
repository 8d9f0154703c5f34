"""
App paths and cross-platform user directories for Promptbook.

User-visible files live in a Documents folder: ~/Documents/promptbook (and
platform equivalents). ``PROMPTBOOK_SETTINGS_DIR`` overrides the config dir.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional


APP_FOLDER_NAME = "promptbook"
SETTINGS_DIR_ENV = "PROMPTBOOK_SETTINGS_DIR"


def _xdg_documents_dir() -> Optional[Path]:
    """Best-effort attempt to read Linux XDG documents directory."""
    config = Path.home() / ".config" / "user-dirs.dirs"
    try:
        text = config.read_text(encoding="utf-8", errors="ignore")
    except OSError:
        return None
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or not line.startswith("XDG_DOCUMENTS_DIR"):
            continue
        parts = line.split("=", 1)
        if len(parts) != 2:
            continue
        value = parts[1].strip().strip('"')
        # Replace $HOME token
        if value.startswith("$HOME/"):
            value = str(Path.home() / value.split("/", 1)[1])
        return Path(value).expanduser()
    return None


def documents_dir() -> Path:
    """Return a user-visible Documents directory across platforms."""
    home = Path.home()
    if sys.platform.startswith("win"):
        candidates = [home / "Documents", home / "My Documents"]
    elif sys.platform == "darwin":
        candidates = [home / "Documents"]
    else:
        xdg = _xdg_documents_dir()
        candidates = [xdg] if xdg else [home / "Documents"]

    for c in candidates:
        if c and c.exists():
            return c
    # Fallback to home if Documents isn't present
    return home


def app_user_root() -> Path:
    root = documents_dir() / APP_FOLDER_NAME
    root.mkdir(parents=True, exist_ok=True)
    return root


def app_config_dir() -> Path:
    override = os.getenv(SETTINGS_DIR_ENV)
    p = Path(override).expanduser() if override else app_user_root() / "config"
    p.mkdir(parents=True, exist_ok=True)
    return p


def app_logs_dir() -> Path:
    p = app_user_root() / "logs"
    p.mkdir(parents=True, exist_ok=True)
    return p


__all__ = [
    "APP_FOLDER_NAME",
    "SETTINGS_DIR_ENV",
    "documents_dir",
    "app_user_root",
    "app_config_dir",
    "app_logs_dir",
]
