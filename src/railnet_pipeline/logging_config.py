"""Logging setup for the ``railnet_pipeline`` namespace."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int | str = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Configure the package logger with a stdout handler and an optional file handler.

    Existing handlers are cleared so repeated calls (server reloads, tests)
    do not duplicate output.
    """
    logger = logging.getLogger("railnet_pipeline")
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
    return logger
