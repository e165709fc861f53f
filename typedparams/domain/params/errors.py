"""
Domain-specific errors for the params bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from typedparams.domain.params.entities import ErrorResponse


class ParamDomainError(Exception):
    """Base error for all params domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ParseFailure(ParamDomainError):
    """Raised when raw request text cannot be converted to its target type.

    Wraps whatever the parse hook raised. There is a single failure kind:
    malformed, out-of-range and wrong-type inputs all end up here and the
    parse hook picks the wording.

    Attributes:
        raw_input: The raw text that failed to parse (may be None).
        cause: The exception raised by the parse hook.
    """

    def __init__(self, raw_input: Optional[str], cause: Exception) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.raw_input = raw_input
        self.cause = cause


class ParameterError(ParamDomainError):
    """Raised at the framework seam when a parameter is rejected.

    Carries a fully-formed error response that the HTTP layer sends as is.
    """

    def __init__(self, error: ErrorResponse) -> None:
        super().__init__(error.body.message)
        self.error = error
