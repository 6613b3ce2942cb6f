"""Settings and logging for collabrank.

Modules call ``get_logger(__name__)`` at import time. Logging is configured
from the global settings the first time any logger is requested.
"""

from __future__ import annotations

from functools import cache
from typing import Any

from collabrank.config import logging as _logging
from collabrank.config.logging import configure_logging
from collabrank.config.settings import (
    CollabRankSettings,
    clear_settings_cache,
    get_settings,
    get_settings_for_cli,
    set_settings,
)

__all__ = [
    "CollabRankSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
    "get_settings",
    "get_settings_for_cli",
    "reset_settings",
    "set_settings",
]


@cache
def _configure_from_settings() -> None:
    configure_logging(get_settings())


@cache
def get_logger(name: str) -> Any:
    """Return the structlog logger for ``name``, configuring logging on first use."""
    _configure_from_settings()
    return _logging.get_logger(name)


def reset_settings() -> None:
    """Forget the global settings and configure logging again on next use."""
    clear_settings_cache()
    _configure_from_settings.cache_clear()
    get_logger.cache_clear()
