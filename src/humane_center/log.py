"""Logging setup for scripts embedding the SDK."""

import logging
from typing import Optional

from humane_center.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the ``humane_center`` logger (idempotent)."""
    logger = logging.getLogger("humane_center")
    logger.setLevel((level or get_settings().log_level).upper())
    if not any(getattr(h, "_humane_center", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._humane_center = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
