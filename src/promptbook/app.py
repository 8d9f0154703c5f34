#!/usr/bin/env python3
"""Open a prompt template, collect placeholder values and print the result."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from src.config.app_settings import get_preview_color_scheme, load_app_settings
from src.config.logging_config import setup_logging


def read_template(path: Path) -> Optional[str]:
    """Return the template body, or ``None`` if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        logging.getLogger(__name__).error("Failed to read template '%s': %s", path, exc)
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fill the placeholders of a prompt template.")
    parser.add_argument("template", type=Path, help="Text file containing the prompt template")
    parser.add_argument("--title", help="Dialog title (defaults to the file name)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the placeholder dialog for a template file."""
    args = build_parser().parse_args(argv)
    settings = load_app_settings()
    setup_logging(debug=args.debug or bool(settings.get("debug_mode")))
    logger = logging.getLogger(__name__)

    content = read_template(args.template)
    if content is None:
        return 1

    from PySide6.QtWidgets import QApplication, QDialog

    from src.promptbook.ui.dialogs import PlaceholderDialog

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Promptbook")

    dialog = PlaceholderDialog(
        args.title or args.template.stem,
        content,
        color_scheme=get_preview_color_scheme(settings),
    )
    if dialog.exec() != QDialog.DialogCode.Accepted:
        logger.info("Placeholder dialog cancelled")
        return 0

    print(dialog.filled_prompt())
    return 0


if __name__ == "__main__":
    sys.exit(main())
