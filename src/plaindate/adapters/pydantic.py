"""Pydantic field type for dates.

Use :data:`PydanticDate` as a field annotation::

    class Booking(BaseModel):
        check_in: PydanticDate

Input is accepted in any form :meth:`Date.scan` understands (text in one of the
recognised layouts, bytes, ``datetime.date``/``datetime``) as well as an existing
:class:`Date`. Output is always the canonical ``YYYY-MM-DD`` string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from pydantic_core import core_schema

from plaindate.domain.date import Date
from plaindate.domain.errors import UnsupportedTypeError

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue


def _validate(value: object) -> Date:
    if isinstance(value, Date):
        return Date(value.year, value.month, value.day)
    result = Date()
    try:
        result.scan(value)
    except UnsupportedTypeError as exc:
        # pydantic only reports ValueError/AssertionError as validation errors
        raise ValueError(str(exc)) from exc
    return result


class _DateAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        _ = (source_type, handler)
        return core_schema.no_info_plain_validator_function(
            _validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                info_arg=False,
                return_schema=core_schema.str_schema(),
                when_used="always",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        _ = (schema, handler)
        return {"type": "string", "format": "date"}


PydanticDate = Annotated[Date, _DateAnnotation]


__all__ = ["PydanticDate"]
