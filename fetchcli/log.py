"""Logging setup: stdlib logging rendered to stderr through rich."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level="WARNING"):
    """
    Configure the `fetchcli` logger once.

    Unknown level names fall back to WARNING. Returns the package logger.
    """
    logger = logging.getLogger("fetchcli")
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logger.setLevel(numeric)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
