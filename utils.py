# utils.py
"""
Utility functions for the order lookup service.
Provides logging configuration and shared helpers.
"""

import json
import logging
import sys
from typing import Any

import config


def setup_logging(
    level: int | str = config.LOG_LEVEL, log_file: str = config.LOG_FILE
) -> None:
    """
    Configure logging for console and file output.

    Args:
        level: Logging level (default: LOG_LEVEL from config).
        log_file: Path of the log file (default: LOG_FILE from config).
    """
    root = logging.getLogger()

    if root.handlers:
        return

    root.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)


def pretty_json(value: Any) -> str:
    """Render a JSON value the way the result area shows it (2-space indent)."""
    return json.dumps(value, indent=2, ensure_ascii=False)
