"""Utility modules for ulam_spiral."""

from ulam_spiral.utils.log import LOGGER_NAME, setup_logger

__all__ = [
    "LOGGER_NAME",
    "setup_logger",
]
