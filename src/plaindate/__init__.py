from __future__ import annotations

from importlib import metadata

from .domain import (
    CANONICAL_LAYOUT,
    TEXT_LAYOUTS,
    Clock,
    Date,
    DateError,
    FormatError,
    InvalidDateError,
    Month,
    ParseError,
    UnsupportedTypeError,
    now,
    of,
    parse,
)

try:
    __version__ = metadata.version("plaindate")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "CANONICAL_LAYOUT",
    "TEXT_LAYOUTS",
    "Clock",
    "Date",
    "DateError",
    "FormatError",
    "InvalidDateError",
    "Month",
    "ParseError",
    "UnsupportedTypeError",
    "__version__",
    "now",
    "of",
    "parse",
]
