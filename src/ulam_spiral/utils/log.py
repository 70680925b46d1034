"""Logger setup for the command-line tools."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "ulam_spiral"


def setup_logger(verbose: bool = False, log_path: Path | None = None) -> logging.Logger:
    """Set up the package logger for console and, optionally, file output.

    Args:
        verbose: Show DEBUG messages on the console instead of INFO and above.
        log_path: If given, also append every message to this file.

    Returns:
        The configured ``ulam_spiral`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_path is not None:
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger
