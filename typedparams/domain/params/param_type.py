"""
Parameter types and binding for the params bounded context.

A parameter type is a record of four hooks rather than a subclass:

    parse(raw) -> value              required, does the conversion
    error_message(failure) -> str    wording template, "%s" marks the name
    error_status() -> int            HTTP status of the error response
    media_type() -> str              content type of the error body

Binding runs ``parse`` on the raw request text and returns either a
``Parsed`` result holding a ``TypedParameter`` or a ``Rejected`` result
holding a fully-formed ``ErrorResponse``. ``bind_or_raise`` is the
exception-raising variant used at the framework seam.

Placeholder rule: the first ``%s`` in the template returned by
``error_message`` is replaced by the parameter name, exactly once. A
template without ``%s`` is used unchanged. The default template starts
with ``%s`` itself, so the name is always substituted the same way.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from typedparams.domain.params.entities import (
    ErrorMessage,
    ErrorResponse,
    Parsed,
    ParseResult,
    Rejected,
    TypedParameter,
)
from typedparams.domain.params.errors import ParameterError, ParseFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")

PARAMETER_NAME_PLACEHOLDER = "%s"
DEFAULT_PARAMETER_NAME = "Parameter"
HTTP_400 = 400
APPLICATION_JSON = "application/json"


def default_error_message(failure: ParseFailure) -> str:
    """Return ``"%s is invalid: <failure message>"``."""
    return f"{PARAMETER_NAME_PLACEHOLDER} is invalid: {failure.message}"


def default_error_status() -> int:
    return HTTP_400


def default_media_type() -> str:
    return APPLICATION_JSON


def format_error_message(template: str, parameter_name: str) -> str:
    """Substitute the parameter name for the first placeholder in ``template``."""
    return template.replace(PARAMETER_NAME_PLACEHOLDER, parameter_name, 1)


@dataclass(frozen=True, eq=False)
class ParamType(Generic[T]):
    """A concrete parameter type: a parse hook plus its error-response policy.

    Two parameter types are equal only when they are the same object, so
    parameters bound through different types never compare equal.

    Attributes:
        name: Label used in reprs and logs, e.g. ``"IntParam"``.
        parse: Converts raw text (or None) to the target type. Any
            exception it raises is a parse failure.
        error_message: Builds the error message template from the failure.
        error_status: Returns the HTTP status for rejected input.
        media_type: Returns the content type of the error body.
    """

    name: str
    parse: Callable[[Optional[str]], T]
    error_message: Callable[[ParseFailure], str] = default_error_message
    error_status: Callable[[], int] = default_error_status
    media_type: Callable[[], str] = default_media_type

    def replace(self, **changes: Any) -> "ParamType[T]":
        """Return a new parameter type with some fields swapped out."""
        return dataclasses.replace(self, **changes)

    def __repr__(self) -> str:
        return f"ParamType({self.name!r})"


def error(
    param_type: ParamType[Any],
    raw_input: Optional[str],
    failure: ParseFailure,
    parameter_name: str = DEFAULT_PARAMETER_NAME,
    log: Optional[logging.Logger] = None,
) -> ErrorResponse:
    """Build the error response sent to the client for a parse failure.

    The raw input is logged at DEBUG and may contain sensitive data. It is
    never copied into the response body unless the message template does so.

    Args:
        param_type: The parameter type whose policy hooks are applied.
        raw_input: The raw text that failed to parse.
        failure: The parse failure.
        parameter_name: Name substituted into the message template.
        log: Logger to write to. Defaults to this module's logger.

    Returns:
        The fully-formed error response.
    """
    (log or logger).debug("Invalid input received: %s", raw_input)
    message = format_error_message(param_type.error_message(failure), parameter_name)
    status = param_type.error_status()
    return ErrorResponse(
        status_code=status,
        body=ErrorMessage(code=status, message=message),
        media_type=param_type.media_type(),
    )


def bind(
    param_type: ParamType[T],
    raw_input: Optional[str],
    parameter_name: str = DEFAULT_PARAMETER_NAME,
    log: Optional[logging.Logger] = None,
) -> ParseResult[T]:
    """Parse ``raw_input`` with ``param_type``.

    Args:
        param_type: The parameter type to bind with.
        raw_input: Raw request text; None when the parameter is absent.
        parameter_name: Label used in the error message.
        log: Logger for the invalid-input DEBUG entry.

    Returns:
        ``Parsed`` with the typed parameter, or ``Rejected`` with the error
        response. A parse hook returning None counts as a failure.
    """
    try:
        value = param_type.parse(raw_input)
        if value is None:
            raise ValueError("no value")
    except Exception as exc:
        failure = ParseFailure(raw_input, exc)
        return Rejected(
            error=error(param_type, raw_input, failure, parameter_name, log),
            failure=failure,
        )
    return Parsed(TypedParameter(param_type, parameter_name, value))


def bind_or_raise(
    param_type: ParamType[T],
    raw_input: Optional[str],
    parameter_name: str = DEFAULT_PARAMETER_NAME,
    log: Optional[logging.Logger] = None,
) -> TypedParameter[T]:
    """Like ``bind``, but raise instead of returning a rejection.

    Raises:
        ParameterError: Carrying the error response, if parsing failed.
    """
    result = bind(param_type, raw_input, parameter_name, log)
    if isinstance(result, Rejected):
        raise ParameterError(result.error) from result.failure
    return result.parameter
