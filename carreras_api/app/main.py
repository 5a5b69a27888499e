"""
Main entrypoint for the Carreras API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and mounts the API router under ``/api``.
The ``create_app`` function builds and configures the app; the
module-level ``app`` is what uvicorn serves, e.g.::

    uvicorn carreras_api.app.main:app --reload

When no repository is passed in, the Upstash client is built from the
environment at startup.  Missing ``KV_REST_API_URL`` or
``KV_REST_API_TOKEN`` raises ``ConfigurationError`` and the server
refuses to start.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import CarrerasAPIError, StoreError
from .core.logging_config import setup_logging
from .core.store import KVRepository, create_kv_client

logger = logging.getLogger(__name__)


def create_app(
    repository: Optional[KVRepository] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repository : Optional[KVRepository]
        Store access used by every route.  Tests pass a repository over
        an in-memory client; in production it is left out and built
        from ``settings`` during startup.
    settings : Optional[Settings]
        Defaults to the settings read from the environment at import.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.repository = repository

    app.include_router(api_router, prefix="/api")

    @app.exception_handler(CarrerasAPIError)
    async def app_error_handler(request: Request, exc: CarrerasAPIError) -> JSONResponse:
        if isinstance(exc, StoreError):
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed bodies are client errors (400), not 422.
        logger.warning("%s %s invalid body: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Cuerpo de la petición inválido.", "errors": jsonable_errors(exc)},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        if app.state.repository is None:
            app.state.repository = KVRepository(
                create_kv_client(settings), index_prefix=settings.index_prefix
            )
            logger.info("Connected to key-value store at %s", settings.kv_rest_api_url)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        if repository is None and app.state.repository is not None:
            await app.state.repository.close()

    return app


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors reduced to location and message."""
    return [{"loc": list(error.get("loc", ())), "msg": error.get("msg", "")} for error in exc.errors()]


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
