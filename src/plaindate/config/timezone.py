"""Timezone configuration for resolving the current date."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from plaindate.domain.date import Date, now

from .errors import ConfigurationError

if TYPE_CHECKING:
    from datetime import tzinfo

    from plaindate.domain.date import Clock

TIMEZONE_ENV: Final[str] = "PLAINDATE_TIMEZONE"


@dataclass(frozen=True, slots=True)
class TimezoneConfig:
    """Zone used to decide which calendar day "now" is; ``None`` means host local time."""

    timezone: tzinfo | None = None

    def today(self, *, clock: Clock | None = None) -> Date:
        if clock is None:
            return now(tz=self.timezone)
        return now(clock=clock, tz=self.timezone)


def load_timezone(name: str) -> tzinfo:
    """Resolve an IANA zone name, raising :class:`ConfigurationError` if unknown."""

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"Unknown timezone: {name}") from exc


def get_timezone_config() -> TimezoneConfig:
    name = os.getenv(TIMEZONE_ENV)
    if name is None or not name.strip():
        return TimezoneConfig()
    return TimezoneConfig(timezone=load_timezone(name.strip()))
