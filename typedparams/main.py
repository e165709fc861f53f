"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health plus any routers supplied by the caller)
- Error handlers (centralized domain-to-HTTP mapping)
- Logging configuration

No parsing logic belongs here.
"""

from typing import Sequence

from fastapi import APIRouter, FastAPI

from typedparams.core.config import settings
from typedparams.interfaces.health import router as health_router
from typedparams.shared.errors.handlers import register_error_handlers
from typedparams.shared.logging import configure_logging


def create_app(routers: Sequence[APIRouter] = ()) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers and error handlers.
    This is the composition root of the application.

    Args:
        routers: Extra routers to mount under the API prefix.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(
        level=settings.log_level,
        log_rejected_input=settings.log_rejected_input,
    )

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    for router in routers:
        app.include_router(router, prefix=settings.api_prefix)

    return app


app = create_app()
