"""
Domain entities for the params bounded context.

Value objects produced by binding a raw request value: the typed
parameter itself, the error body and response sent when binding fails,
and the two variants of a bind result.
They contain no framework imports and no IO operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union

from typedparams.domain.params.errors import ParseFailure

if TYPE_CHECKING:
    from typedparams.domain.params.param_type import ParamType

T = TypeVar("T")


@dataclass(frozen=True)
class ErrorMessage:
    """Error body sent to the client: ``{"code": ..., "message": ...}``."""

    code: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class ErrorResponse:
    """A fully-formed error response, ready for the HTTP layer.

    Attributes:
        status_code: HTTP status of the response.
        body: The error body. ``body.code`` always equals ``status_code``.
        media_type: Content type of the rendered body.
    """

    status_code: int
    body: ErrorMessage
    media_type: str


class TypedParameter(Generic[T]):
    """A request parameter that was parsed successfully.

    Instances are only created by binding, and only once parsing has
    produced a non-null value. Equality is decided by the parameter type
    and the wrapped value: two parameters of different types are never
    equal, even when their values are.
    Hashing follows the wrapped value too: a parameter holding an
    unhashable value (a list, a dict) raises TypeError when hashed.
    """

    __slots__ = ("_param_type", "_parameter_name", "_value")

    def __init__(self, param_type: ParamType[T], parameter_name: str, value: T) -> None:
        if value is None:
            raise ValueError("TypedParameter cannot wrap None")
        self._param_type = param_type
        self._parameter_name = parameter_name
        self._value = value

    @property
    def param_type(self) -> ParamType[T]:
        return self._param_type

    @property
    def parameter_name(self) -> str:
        return self._parameter_name

    @property
    def value(self) -> T:
        return self._value

    def get(self) -> T:
        """Return the parsed value."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, TypedParameter):
            return NotImplemented
        return self._param_type is other._param_type and self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{self._param_type.name}({self._value!r})"


@dataclass(frozen=True)
class Parsed(Generic[T]):
    """Successful bind result."""

    parameter: TypedParameter[T]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """Failed bind result.

    Attributes:
        error: The response to send to the client.
        failure: The parse failure it was built from.
    """

    error: ErrorResponse
    failure: ParseFailure

    @property
    def ok(self) -> bool:
        return False


ParseResult = Union[Parsed[T], Rejected]
