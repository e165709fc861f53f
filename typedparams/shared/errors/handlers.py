"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
Rejected parameters are rendered exactly as their parameter type built them.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.responses import Response

from typedparams.domain.params.entities import ErrorMessage
from typedparams.domain.params.errors import ParameterError
from typedparams.interfaces.params.responses import render_error

logger = logging.getLogger(__name__)

HTTP_500 = 500


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ParameterError)
    async def handle_parameter_error(
        _request: Request, exc: ParameterError
    ) -> Response:
        """Send the error response built when the parameter was rejected."""
        logger.info("Rejected request parameter: status=%d", exc.error.status_code)
        return render_error(exc.error)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return JSONResponse(
            status_code=HTTP_500,
            content=ErrorMessage(HTTP_500, "Internal server error").to_dict(),
        )
