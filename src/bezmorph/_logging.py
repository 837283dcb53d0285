from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "bezmorph"


def setup_logging(level: int = logging.WARNING, console: Console | None = None) -> logging.Logger:
    """Configure the ``bezmorph`` logger with a single rich handler.

    Existing handlers are replaced so repeated CLI invocations in one process
    do not duplicate output.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=False)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
