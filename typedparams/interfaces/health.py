"""
Health and capability router.

Liveness probe that also reports which built-in parameter types this
deployment can bind, keyed by their short name.
"""

from fastapi import APIRouter

from typedparams.core.config import settings
from typedparams.domain.params.builtin import BUILTIN_PARAM_TYPES
from typedparams.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns status, version and the built-in parameter types.",
)
def health_check() -> HealthResponse:
    """Report status and the available parameter types."""
    return HealthResponse(
        status="ok",
        version=settings.version,
        param_types={
            short_name: param_type.name
            for short_name, param_type in BUILTIN_PARAM_TYPES.items()
        },
    )
