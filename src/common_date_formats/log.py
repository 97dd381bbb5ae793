"""Logging setup for the package.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. Entrypoints call `configure_logging`
once; calling it again only adjusts the level.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "common_date_formats"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Args:
        level: Level name or number, e.g. ``"DEBUG"``.

    Returns:
        The package logger.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(getattr(h, "_cdf_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        handler._cdf_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
