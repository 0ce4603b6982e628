"""
Main entrypoint for the Home Healthcare Booking API.

This module assembles the FastAPI application, sets up logging,
installs the error envelope handlers and mounts the API router under
``/api``.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn homecare_api.app.main:app --reload

The entity store is chosen from ``settings.storage_backend`` when the
application starts unless one has been installed already with
``storage.set_storage`` (tests do this).
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.error_handlers import register_exception_handlers
from .api.router import router as api_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.seed import seed_storage
from .storage import get_storage


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that the imports and startup below can log.
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    @app.on_event("startup")
    async def startup_event() -> None:
        if settings.booking_transitions.lower() not in {"permissive", "strict"}:
            raise ValueError(
                f"BOOKING_TRANSITIONS must be 'permissive' or 'strict', got '{settings.booking_transitions}'"
            )
        storage = get_storage()
        logger.info(
            "%s %s started with %s (%s booking transitions)",
            settings.project_name,
            settings.api_version,
            type(storage).__name__,
            settings.booking_transitions,
        )
        if settings.seed_data:
            seed_storage(storage)

    return app


app = create_app()
