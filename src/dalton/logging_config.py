"""Logging configuration for the ``dalton`` logger namespace."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """Configure the ``dalton`` logger.

    Messages go to stdout, and additionally to *log_file* when given.
    Calling this again replaces the handlers rather than duplicating
    them.

    Args:
        level: Logging level (e.g. ``logging.DEBUG``).
        log_file: Optional path to write logs to.
    """
    logger = logging.getLogger("dalton")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
