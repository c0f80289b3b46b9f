"""SQLAlchemy column type storing dates in canonical text form."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import String, TypeDecorator

from plaindate.domain.date import Date, of

if TYPE_CHECKING:
    from sqlalchemy import Dialect


class DateType(TypeDecorator[Date]):
    """Bind dates as ``YYYY-MM-DD`` strings and scan whatever the driver returns.

    Result values go through :meth:`Date.scan`, so drivers handing back native
    ``date`` objects and those returning text are both supported.
    """

    impl = String
    cache_ok = True

    @property
    def python_type(self) -> type[Date]:
        return Date

    def process_bind_param(self, value: Date | date | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        if isinstance(value, date):
            value = of(value)
        return value.value()

    def process_result_value(self, value: object, dialect: Dialect) -> Date | None:
        _ = dialect
        if value is None:
            return None
        result = Date()
        result.scan(value)
        return result


__all__ = ["DateType"]
