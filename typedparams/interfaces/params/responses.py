"""
Rendering of domain error responses as Starlette responses.

JSON media types get the ``{"code", "message"}`` body. Any other media
type gets the bare message text.
"""

from starlette.responses import JSONResponse, Response

from typedparams.domain.params.entities import ErrorResponse


def is_json_media_type(media_type: str) -> bool:
    """Return True for ``application/json`` and ``+json`` structured types."""
    base = media_type.split(";", 1)[0].strip().lower()
    return base == "application/json" or base.endswith("+json")


def render_error(error: ErrorResponse) -> Response:
    """Turn a domain error response into the response sent to the client."""
    if is_json_media_type(error.media_type):
        return JSONResponse(
            status_code=error.status_code,
            content=error.body.to_dict(),
            media_type=error.media_type,
        )
    return Response(
        content=error.body.message,
        status_code=error.status_code,
        media_type=error.media_type,
    )
