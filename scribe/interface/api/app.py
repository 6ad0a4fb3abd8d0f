"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scribe.config import Settings
from scribe.interface.api.routes import blogs, comments, health, users
from scribe.util.di.container import create_container, setup_di
from scribe.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for errors no route mapped."""
    logfire.exception(
        "Unhandled error", path=request.url.path, method=request.method, error=str(exc)
    )
    return JSONResponse(status_code=500, content={"detail": "Something went wrong!"})


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container when omitted.
            Tests pass a container built from mock providers.
    """
    settings = Settings()

    # Outbound calls to the media host (Logfire must be configured first)
    instrument_httpx()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        # Releases the engine and the upload HTTP client
        await app.state.dishka_container.close()

    app_instance = FastAPI(
        title="Scribe API",
        description="Backend API for Scribe - blogs, comments and replies",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(Exception, handle_unexpected_error)

    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(blogs.router)
    app_instance.include_router(comments.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
