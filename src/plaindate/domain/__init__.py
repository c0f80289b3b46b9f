"""Domain layer: the date value type and its errors."""

from __future__ import annotations

from .date import CANONICAL_LAYOUT, TEXT_LAYOUTS, Clock, Date, Month, now, of, parse
from .errors import DateError, FormatError, InvalidDateError, ParseError, UnsupportedTypeError

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
    "now",
    "of",
    "parse",
]
