"""Error types raised by the date value type."""

from __future__ import annotations

from typing import Any


class DateError(Exception):
    """Base class for all plaindate errors."""


class ParseError(DateError, ValueError):
    """Raised when text does not match an explicit layout or names an impossible date."""

    def __init__(self, layout: str, text: str, reason: str) -> None:
        super().__init__(f"Cannot parse {text!r} as {layout!r}: {reason}")
        self.layout = layout
        self.text = text
        self.reason = reason


class FormatError(DateError, ValueError):
    """Raised when text matches none of the recognised date layouts."""

    def __init__(self, text: str | bytes, layouts: tuple[str, ...]) -> None:
        supported = ", ".join(repr(layout) for layout in layouts)
        super().__init__(f"Unsupported format {text!r}. Only {supported} are supported")
        self.text = text


class InvalidDateError(DateError, ValueError):
    """Raised when the calendar cannot represent a date's year/month/day."""

    def __init__(self, date: Any, reason: str) -> None:
        super().__init__(f"Invalid date {date}: {reason}")
        self.date = date
        self.reason = reason


class UnsupportedTypeError(DateError, TypeError):
    """Raised when a database value of an unhandled type is scanned."""

    def __init__(self, value_type: type) -> None:
        super().__init__(f"Unsupported scanning type {value_type.__qualname__}")
        self.value_type = value_type


__all__ = [
    "DateError",
    "FormatError",
    "InvalidDateError",
    "ParseError",
    "UnsupportedTypeError",
]
