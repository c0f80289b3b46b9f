"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import LOG_LEVEL_ENV, configure_logging, get_log_level
from .timezone import TIMEZONE_ENV, TimezoneConfig, get_timezone_config, load_timezone

__all__ = [
    "LOG_LEVEL_ENV",
    "TIMEZONE_ENV",
    "ConfigurationError",
    "TimezoneConfig",
    "configure_logging",
    "get_log_level",
    "get_timezone_config",
    "load_timezone",
]
