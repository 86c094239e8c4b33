"""Logger setup shared by the chain engine, the generators and the CLI."""
from __future__ import annotations

import logging
from typing import Optional

from markov_text.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Return a logger with a single stream handler attached.

    Args:
        name: Logger namespace, usually ``__name__``
        level: Level name; defaults to ``settings.LOG_LEVEL``
    """
    logger = logging.getLogger(name)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False

    resolved = logging.getLevelName((level or settings.LOG_LEVEL).upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    return logger
