"""Route ``convo_bot`` loggers through a rich console handler."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

_ROOT_LOGGER = "convo_bot"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a single ``RichHandler`` to the package logger; safe to call repeatedly."""
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(rich_tracebacks=True, show_path=False))
    logger.propagate = False
    return logger
