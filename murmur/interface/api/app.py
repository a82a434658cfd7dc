"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from murmur.config import Settings
from murmur.interface.api.cors import setup_cors
from murmur.interface.api.routes import admin, auth, avatar, comments, health
from murmur.util.di.container import close_di, create_container, setup_di
from murmur.util.logging import setup_logging
from murmur.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    yield
    # Releases APP-scoped clients (database engine, Redis)
    await close_di(app)


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed requests as 400, like every other client error."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(
            {"detail": "Invalid request", "errors": exc.errors()}
        ),
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a test container.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()
    setup_logging(settings)

    # Instrument httpx for outbound HTTP requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Murmur Comments API",
        description="Backend API for an embeddable threaded comment widget",
        version="0.1.0",
        lifespan=_lifespan,
    )

    instrument_fastapi(app_instance)

    setup_cors(app_instance, settings.allow_sites)

    app_instance.add_exception_handler(
        RequestValidationError, _request_validation_handler
    )

    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(avatar.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
