"""Calendar date value type independent of time-of-day and timezone."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum
from typing import TYPE_CHECKING, Final, Protocol

from .errors import FormatError, InvalidDateError, ParseError, UnsupportedTypeError

if TYPE_CHECKING:
    from datetime import tzinfo

log = logging.getLogger(__name__)

CANONICAL_LAYOUT: Final[str] = "%Y-%m-%d"
TEXT_LAYOUTS: Final[tuple[str, ...]] = (CANONICAL_LAYOUT, "%Y/%m/%d", "%d %b %Y")

# Fixed-width shapes of TEXT_LAYOUTS; month names are English regardless of locale.
_TEXT_PATTERNS: Final[dict[str, re.Pattern[str]]] = {
    "%Y-%m-%d": re.compile(r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})", re.ASCII),
    "%Y/%m/%d": re.compile(r"(?P<year>\d{4})/(?P<month>\d{2})/(?P<day>\d{2})", re.ASCII),
    "%d %b %Y": re.compile(r"(?P<day>\d{2}) (?P<month>[A-Za-z]{3}) (?P<year>\d{4})", re.ASCII),
}

_DAYS_PER_400_YEARS: Final[int] = 146_097


class Month(IntEnum):
    """Month of the year, ``JANUARY == 1``."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def __str__(self) -> str:
        return self.name.capitalize()


_MONTH_ABBREVIATIONS: Final[dict[str, Month]] = {month.name[:3].lower(): month for month in Month}


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _coerce_month(value: Month | int) -> Month | int:
    if not isinstance(value, Month) and isinstance(value, int) and 1 <= value <= 12:
        return Month(value)
    return value


@dataclass(slots=True, eq=False, repr=False)
class Date:
    """A year/month/day triple.

    Fields are not range-checked on construction; the calendar is consulted only
    where one is needed (parsing, :meth:`is_valid`, :meth:`to_date`). ``Date()`` is the
    zero value that :meth:`scan` and :meth:`unmarshal_text` overwrite in place.
    """

    year: int = 0
    month: Month | int = 0
    day: int = 0

    def __post_init__(self) -> None:
        self.month = _coerce_month(self.month)

    @classmethod
    def from_date(cls, value: date) -> Date:
        return of(value)

    @classmethod
    def from_text(cls, text: str | bytes) -> Date:
        """Return a new date parsed from any of :data:`TEXT_LAYOUTS`."""

        result = cls()
        result.unmarshal_text(text)
        return result

    # Comparison -------------------------------------------------------------

    def after(self, other: Date) -> bool:
        """Report whether this date is chronologically later than ``other``."""

        if self.year != other.year:
            return self.year > other.year
        if self.month != other.month:
            return self.month > other.month
        return self.day > other.day

    def before(self, other: Date) -> bool:
        return other.after(self)

    def equal(self, other: Date) -> bool:
        return not self.after(other) and not self.before(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.equal(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return not self.after(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return not self.before(other)

    # Difference -------------------------------------------------------------

    def sub(self, other: Date) -> int:
        """Return the whole days ``self - other``.

        Out-of-range months and days carry over the way a calendar normalises them,
        so ``Date(2001, 2, 30)`` counts as 2001-03-02 and ``Date(2001, 13, 1)`` as
        2002-01-01. Any year works, the zero value included.
        """

        return self._day_number() - other._day_number()

    def __sub__(self, other: object) -> int:
        if not isinstance(other, Date):
            return NotImplemented
        return self.sub(other)

    def _day_number(self) -> int:
        # The Gregorian calendar repeats every 400 years, so shift the year into
        # 1..400 where ``date`` can represent it and count the cycles separately.
        year, month_index = divmod(self.year * 12 + int(self.month) - 1, 12)
        cycles, year_in_cycle = divmod(year - 1, 400)
        first_of_month = date(year_in_cycle + 1, month_index + 1, 1)
        return cycles * _DAYS_PER_400_YEARS + first_of_month.toordinal() + self.day - 1

    @property
    def is_valid(self) -> bool:
        """Report whether month and day name a real day of the proleptic Gregorian calendar."""

        if not isinstance(self.month, int) or not isinstance(self.day, int):
            return False
        try:
            date((self.year - 1) % 400 + 1, self.month, self.day)
        except ValueError:
            return False
        return True

    def to_date(self) -> date:
        try:
            return date(self.year, self.month, self.day)
        except ValueError as exc:
            raise InvalidDateError(self, str(exc)) from exc

    # Text -------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.year:04d}-{int(self.month):02d}-{self.day:02d}"

    def __repr__(self) -> str:
        return f"Date(year={self.year!r}, month={int(self.month)!r}, day={self.day!r})"

    def marshal_text(self) -> bytes:
        """Return the canonical ``YYYY-MM-DD`` form as bytes."""

        return str(self).encode("ascii")

    def unmarshal_text(self, data: bytes | bytearray | memoryview | str) -> None:
        """Overwrite this date with ``data`` parsed from any of :data:`TEXT_LAYOUTS`.

        The layouts are tried in order and the first match wins. On failure a
        :class:`FormatError` carrying the original input is raised and this date
        is left unchanged.
        """

        self._assign(_parse_text(data))

    # Database ---------------------------------------------------------------

    def scan(self, value: object) -> None:
        """Overwrite this date from a value returned by a database driver."""

        match value:
            case date():
                self._assign(of(value))
            case bytes() | bytearray() | memoryview():
                self.unmarshal_text(value)
            case str():
                self.unmarshal_text(value)
            case _:
                log.debug("Cannot scan %r into a date", value)
                raise UnsupportedTypeError(type(value))

    def value(self) -> str:
        """Return the column value to bind for this date."""

        return str(self)

    def __conform__(self, protocol: object) -> str:
        """DB-API adaptation hook, used by :mod:`sqlite3` when binding parameters."""

        _ = protocol
        return self.value()

    def __composite_values__(self) -> tuple[int, int, int]:
        """Return values in a shape suitable for SQLAlchemy composite columns."""
        return (self.year, int(self.month), self.day)

    def _assign(self, other: Date) -> None:
        self.year = other.year
        self.month = other.month
        self.day = other.day


def now(*, clock: Clock = _local_now, tz: tzinfo | None = None) -> Date:
    """Return today's date.

    ``clock`` defaults to the current time in the host's local zone. When ``tz`` is
    given the clock reading is converted to that zone before taking its date.
    """

    current = clock()
    if tz is not None:
        current = current.astimezone(tz)
    return of(current)


def of(timestamp: date) -> Date:
    """Return the calendar day ``timestamp`` falls on in its own zone."""

    return Date(timestamp.year, timestamp.month, timestamp.day)


def parse(layout: str, text: str) -> Date:
    """Parse ``text`` with a :func:`~datetime.datetime.strptime` layout."""

    try:
        parsed = datetime.strptime(text, layout)  # noqa: DTZ007
    except ValueError as exc:
        raise ParseError(layout, text, str(exc)) from exc
    return of(parsed)


def _parse_text(data: bytes | bytearray | memoryview | str) -> Date:
    original: str | bytes = data if isinstance(data, (str, bytes)) else bytes(data)
    if isinstance(original, str):
        text = original
    else:
        try:
            text = original.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FormatError(original, TEXT_LAYOUTS) from exc

    for layout in TEXT_LAYOUTS:
        candidate = _match_layout(layout, text)
        if candidate is not None:
            return candidate

    log.debug("No date layout matched %r", original)
    raise FormatError(original, TEXT_LAYOUTS)


def _match_layout(layout: str, text: str) -> Date | None:
    match = _TEXT_PATTERNS[layout].fullmatch(text)
    if match is None:
        return None
    month_field = match["month"]
    if month_field.isdigit():
        month: Month | int | None = int(month_field)
    else:
        month = _MONTH_ABBREVIATIONS.get(month_field.lower())
    if month is None:
        return None
    candidate = Date(int(match["year"]), month, int(match["day"]))
    return candidate if candidate.is_valid else None


__all__ = [
    "CANONICAL_LAYOUT",
    "TEXT_LAYOUTS",
    "Clock",
    "Date",
    "Month",
    "now",
    "of",
    "parse",
]
