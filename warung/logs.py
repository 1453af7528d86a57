"""Logging setup."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from warung.config import LOG_LEVEL


def resolve_level(level: str | int) -> int:
    """Map a level name or number to a logging level, falling back to WARNING."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: str | int = LOG_LEVEL) -> logging.Logger:
    """Attach a stderr RichHandler to the ``warung`` logger once."""
    logger = logging.getLogger("warung")
    logger.setLevel(resolve_level(level))
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
