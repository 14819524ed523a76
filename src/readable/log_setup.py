"""Logging setup for the readable package."""

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "readable"


def setup_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """Configure the package logger and return it.

    Installs a single stderr RichHandler; repeated calls only adjust the level.

    Args:
        level: Level name (e.g. "DEBUG") or numeric level.

    Returns:
        The `readable` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
