"""Logging setup for processes embedding the engine."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

from cashcast_config import get_settings


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure engine logging.

    - Console output with timestamps and module names
    - Configurable log level for cashcast modules (from settings)
    - WARNING level for noisy HTTP client loggers
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("cashcast").setLevel(log_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
