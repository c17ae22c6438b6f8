"""Logging setup shared by the CLI entry points."""

from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "hardhat"


def configure_logging(verbosity: int = 0, logger_name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Configure and return the package logger.

    ``verbosity`` 0 logs warnings only, 1 adds progress information and 2 or
    more enables per-file debug output.
    """

    logger = logging.getLogger(logger_name)
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")
        )
        logger.addHandler(handler)

    return logger
