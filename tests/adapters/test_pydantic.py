from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import BaseModel, ConfigDict, ValidationError

from plaindate import Date, Month
from plaindate.adapters.pydantic import PydanticDate


class Booking(BaseModel):
    model_config = ConfigDict(extra="ignore")

    check_in: PydanticDate
    check_out: PydanticDate | None = None


@pytest.mark.parametrize("raw", ["2009-11-15", "2009/11/15", "15 Nov 2009", b"2009-11-15"])
def test_booking_accepts_all_text_layouts(raw: str | bytes, november_fifteenth: Date) -> None:
    booking = Booking.model_validate({"check_in": raw})

    assert isinstance(booking.check_in, Date)
    assert booking.check_in == november_fifteenth
    assert booking.check_out is None


def test_booking_accepts_native_dates() -> None:
    tokyo = timezone(timedelta(hours=9))
    booking = Booking(
        check_in=date(2001, 3, 5),  # type: ignore[arg-type]
        check_out=datetime(2001, 3, 7, 1, 0, tzinfo=tokyo),  # type: ignore[arg-type]
    )

    assert booking.check_in == Date(2001, Month.MARCH, 5)
    assert booking.check_out == Date(2001, Month.MARCH, 7)


def test_booking_copies_date_instances(march_fifth: Date) -> None:
    booking = Booking(check_in=march_fifth)

    march_fifth.unmarshal_text("2009-11-15")

    assert booking.check_in == Date(2001, Month.MARCH, 5)


def test_booking_serialises_canonical_strings() -> None:
    booking = Booking.model_validate_json('{"check_in": "05 Mar 2001", "check_out": "2001/03/07"}')

    assert booking.model_dump() == {"check_in": "2001-03-05", "check_out": "2001-03-07"}
    assert booking.model_dump_json() == '{"check_in":"2001-03-05","check_out":"2001-03-07"}'


def test_booking_serialises_missing_optional_date() -> None:
    booking = Booking.model_validate({"check_in": "2001-03-05"})

    assert booking.model_dump_json() == '{"check_in":"2001-03-05","check_out":null}'


def test_booking_rejects_unknown_format() -> None:
    with pytest.raises(ValidationError) as exc:
        Booking.model_validate({"check_in": "not-a-date"})

    assert "Unsupported format" in str(exc.value)
    assert "not-a-date" in str(exc.value)


def test_booking_rejects_unsupported_types() -> None:
    with pytest.raises(ValidationError) as exc:
        Booking.model_validate({"check_in": 20011105})

    assert "Unsupported scanning type int" in str(exc.value)


def test_booking_json_schema_describes_dates() -> None:
    schema = Booking.model_json_schema()
    check_in = schema["properties"]["check_in"]

    assert check_in["type"] == "string"
    assert check_in["format"] == "date"
    assert schema["required"] == ["check_in"]
