"""Logging setup for plaindate entry points."""

from __future__ import annotations

import logging
import os
from typing import Final

from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "PLAINDATE_LOG_LEVEL"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Attach a stderr handler to the root logger for the ``plaindate`` command.

    The library itself only emits records; this is called by :func:`plaindate.ui.cli.run`
    with the level from :func:`get_log_level`. ``force=True`` replaces handlers that
    are already installed.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def get_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``PLAINDATE_LOG_LEVEL``, or ``default`` when unset."""

    name = os.getenv(LOG_LEVEL_ENV)
    if name is None or not name.strip():
        return default
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV}: {name}")
    return level
