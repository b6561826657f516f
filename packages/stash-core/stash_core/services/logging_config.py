"""Root logger setup for the stash CLI."""
from __future__ import annotations

import logging
import os
from typing import Any, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def resolve_level(level: Any) -> int:
    """Map a level name or number to a logging level; unknown names give WARNING."""
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if isinstance(resolved, int):
        return resolved
    logger.warning(f"Unknown log level {level!r}, using {DEFAULT_LEVEL}")
    return logging.getLevelName(DEFAULT_LEVEL)


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once.

    Level precedence: argument, STASH_LOG_LEVEL, ``logging.level`` from
    config, WARNING.
    """
    root = logging.getLogger()
    if root.handlers:
        if level:
            root.setLevel(resolve_level(level))
        return

    if level is None:
        level = os.getenv("STASH_LOG_LEVEL")
    if level is None:
        from .config_service import get_logging_settings
        level = get_logging_settings().get("level", DEFAULT_LEVEL)

    logging.captureWarnings(True)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(resolve_level(level))
