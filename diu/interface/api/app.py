"""FastAPI application."""

import sys

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from diu.config import DEFAULT_JWT_SECRET, Settings
from diu.interface.api.routes import comments, health, likes, posts, profiles, stamps
from diu.util.di.container import create_container, setup_di
from diu.util.error import ConfigurationError
from diu.util.observability import instrument_fastapi

API_PREFIX = "/api"


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and hide their details from the client."""
    logfire.error(
        "Unhandled error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=sys.exc_info(),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    handles this in production.

    Args:
        container: DI container to use (tests pass one with in-memory
            persistence); the production container is built when omitted

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    settings = Settings()
    if settings.environment == "production" and (
        settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError(
            "AUTH__JWT_SECRET", "must be set to a private value in production"
        )

    app_instance = FastAPI(
        title="DIU API",
        description="Backend API for DIU - anonymous venting with posts, "
        "nested comments, likes and daily stamps",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials="*" not in settings.api.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(Exception, unhandled_error_handler)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    # Fixed /users/... paths must match before /users/{username}/...
    app_instance.include_router(profiles.router, prefix=API_PREFIX)
    app_instance.include_router(posts.router, prefix=API_PREFIX)
    app_instance.include_router(comments.router, prefix=API_PREFIX)
    app_instance.include_router(likes.router, prefix=API_PREFIX)
    app_instance.include_router(stamps.router, prefix=API_PREFIX)

    return app_instance
