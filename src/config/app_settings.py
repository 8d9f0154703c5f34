"""
Application settings for Promptbook.

Settings are stored as JSON in the user config directory. Environment
variables (optionally from a ``.env`` file) can override the config directory
and debug mode.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from src.config.paths import app_config_dir
from src.promptbook.core.color_schemes import PreviewColorScheme

SETTINGS_FILENAME = "app_settings.json"
DEFAULT_SETTINGS: Dict[str, Any] = {
    "preview_color_scheme": PreviewColorScheme.default().name,
    "debug_mode": False,
}


def settings_file() -> Path:
    return app_config_dir() / SETTINGS_FILENAME


def load_app_settings() -> Dict[str, Any]:
    """Load settings from disk merged over ``DEFAULT_SETTINGS``.

    A missing file is created with defaults; an unreadable one is logged and
    defaults are returned.
    """
    load_dotenv()
    path = settings_file()
    settings = DEFAULT_SETTINGS.copy()

    if not path.exists():
        logging.info(f"'{path}' not found. Creating with default settings.")
        save_app_settings(settings)
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                stored = json.load(f)
            if isinstance(stored, dict):
                settings.update(stored)
            else:
                logging.warning(f"Ignoring '{path}': expected a JSON object.")
        except (OSError, json.JSONDecodeError) as e:
            logging.warning(f"Error loading '{path}': {e}. Using default settings.")

    if os.getenv("PROMPTBOOK_DEBUG", "").lower() in {"1", "true", "yes"}:
        settings["debug_mode"] = True
    return settings


def save_app_settings(settings: Dict[str, Any]) -> None:
    """Save the provided settings dictionary to the settings file."""
    path = settings_file()
    try:
        with path.open("w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2)
        logging.info(f"Settings saved to '{path}'.")
    except OSError as e:
        logging.error(f"Error saving settings to '{path}': {e}")


def get_preview_color_scheme(settings: Optional[Dict[str, Any]] = None) -> PreviewColorScheme:
    """Return the configured preview colour scheme, or the default one."""
    settings = settings if settings is not None else load_app_settings()
    name = settings.get("preview_color_scheme")
    scheme = PreviewColorScheme.from_name(name)
    if scheme is None:
        logging.warning(f"Unknown preview colour scheme '{name}', using default.")
        return PreviewColorScheme.default()
    return scheme


def set_preview_color_scheme(scheme: PreviewColorScheme) -> None:
    settings = load_app_settings()
    settings["preview_color_scheme"] = scheme.name
    save_app_settings(settings)


__all__ = [
    "DEFAULT_SETTINGS",
    "get_preview_color_scheme",
    "load_app_settings",
    "save_app_settings",
    "set_preview_color_scheme",
    "settings_file",
]
