"""
Centralized logging configuration for Promptbook.
Provides consistent logging setup with file rotation and configurable log levels.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from src.config.paths import app_logs_dir


class ApplicationLogger:
    """Centralized logging configuration for the application."""

    def __init__(self, app_name="promptbook", log_dir: Optional[Path] = None):
        self.app_name = app_name
        self.log_dir = log_dir or app_logs_dir()
        self.log_dir.mkdir(parents=True, exist_ok=True)

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"{self.app_name}.log"

    def setup(self, debug=False):
        """Configure application-wide logging."""
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

        # Clear existing handlers
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        # File handler with rotation
        file_handler = logging.handlers.RotatingFileHandler(
            self.log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG if debug else logging.INFO)

        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - '
            '[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(detailed_formatter)

        simple_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )
        console_handler.setFormatter(simple_formatter)

        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

        self._configure_module_loggers(debug)

        root_logger.info(f"Logging initialized - Debug: {debug}, Log dir: {self.log_dir}")

    def _configure_module_loggers(self, debug):
        """Configure logging levels for specific modules."""
        module_configs = {
            'src.promptbook.core.placeholders': logging.DEBUG if debug else logging.INFO,
            'src.promptbook.ui': logging.DEBUG if debug else logging.INFO,
            'src.config': logging.INFO,
        }

        for module, level in module_configs.items():
            logging.getLogger(module).setLevel(level)


def setup_logging(debug: bool = False, log_dir: Optional[Path] = None) -> ApplicationLogger:
    """Configure logging and return the logger manager."""
    app_logger = ApplicationLogger(log_dir=log_dir)
    app_logger.setup(debug=debug)
    return app_logger


__all__ = ["ApplicationLogger", "setup_logging"]
