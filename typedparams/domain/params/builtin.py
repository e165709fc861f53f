"""
Built-in parameter types.

Ready-made ParamType values for the common request parameter shapes.
All of them reject a missing (None) value.
"""

import math
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional, TypeVar
from uuid import UUID

from typedparams.domain.params.errors import ParseFailure
from typedparams.domain.params.param_type import ParamType

E = TypeVar("E", bound=Enum)

ISO_8601_MESSAGE = "%s must be in a ISO-8601 format."


def _require(raw: Optional[str]) -> str:
    if raw is None:
        raise ValueError("value is missing")
    return raw.strip()


def _template(text: str):
    def error_message(_failure: ParseFailure) -> str:
        return text

    return error_message


def _plain_number(raw: Optional[str], kind: str) -> str:
    """Return the stripped text, refusing digit separators and non-ASCII digits."""
    text = _require(raw)
    if "_" in text or not text.isascii():
        raise ValueError(f"invalid literal for {kind}: {text!r}")
    return text


def parse_int(raw: Optional[str]) -> int:
    return int(_plain_number(raw, "int() with base 10"))


def parse_float(raw: Optional[str]) -> float:
    value = float(_plain_number(raw, "float()"))
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {raw!r}")
    return value


def parse_boolean(raw: Optional[str]) -> bool:
    text = _require(raw).lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def parse_uuid(raw: Optional[str]) -> UUID:
    return UUID(_require(raw))


def parse_date(raw: Optional[str]) -> date:
    return date.fromisoformat(_require(raw))


def parse_datetime(raw: Optional[str]) -> datetime:
    """Parse an ISO-8601 timestamp. Naive timestamps are taken as UTC."""
    text = _require(raw)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def parse_non_empty_string(raw: Optional[str]) -> str:
    text = _require(raw)
    if not text:
        raise ValueError("value is empty")
    return text


INT_PARAM: ParamType[int] = ParamType(name="IntParam", parse=parse_int)

FLOAT_PARAM: ParamType[float] = ParamType(
    name="FloatParam",
    parse=parse_float,
    error_message=_template("%s is not a number."),
)

BOOLEAN_PARAM: ParamType[bool] = ParamType(
    name="BooleanParam",
    parse=parse_boolean,
    error_message=_template('%s must be "true" or "false".'),
)

UUID_PARAM: ParamType[UUID] = ParamType(
    name="UUIDParam",
    parse=parse_uuid,
    error_message=_template("%s must be a valid UUID."),
)

DATE_PARAM: ParamType[date] = ParamType(
    name="DateParam",
    parse=parse_date,
    error_message=_template(ISO_8601_MESSAGE),
)

DATETIME_PARAM: ParamType[datetime] = ParamType(
    name="DateTimeParam",
    parse=parse_datetime,
    error_message=_template(ISO_8601_MESSAGE),
)

NON_EMPTY_STRING_PARAM: ParamType[str] = ParamType(
    name="NonEmptyStringParam",
    parse=parse_non_empty_string,
    error_message=_template("%s must not be empty."),
)


def enum_param(enum_cls: type[E]) -> ParamType[E]:
    """Build a parameter type for ``enum_cls``.

    Input matches a member by value first, then by name ignoring case.
    The error message lists the accepted values.
    """
    allowed = ", ".join(str(member.value) for member in enum_cls)

    def parse(raw: Optional[str]) -> E:
        text = _require(raw)
        for member in enum_cls:
            if str(member.value) == text:
                return member
        for member in enum_cls:
            if member.name.lower() == text.lower():
                return member
        raise ValueError(f"unknown {enum_cls.__name__}: {raw!r}")

    return ParamType(
        name=f"{enum_cls.__name__}Param",
        parse=parse,
        error_message=_template(f"%s must be one of: {allowed}."),
    )


# Short names for the ready-made types, as used by the CLI and /health.
BUILTIN_PARAM_TYPES: dict[str, ParamType] = {
    "int": INT_PARAM,
    "float": FLOAT_PARAM,
    "bool": BOOLEAN_PARAM,
    "uuid": UUID_PARAM,
    "date": DATE_PARAM,
    "datetime": DATETIME_PARAM,
    "string": NON_EMPTY_STRING_PARAM,
}
