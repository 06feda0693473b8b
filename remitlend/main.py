"""
RemitLend Score Service - Main Application Entry Point

A mock credit score API: deterministic per-user base scores, credit bands,
repayment-driven score updates and a single error-response pipeline.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse
from slowapi.middleware import SlowAPIMiddleware

from remitlend import __version__
from remitlend.core.config import Settings, get_settings
from remitlend.core.logging import setup_logging
from remitlend.core.metrics import get_metrics, get_metrics_content_type
from remitlend.core.rate_limit import build_limiter
from remitlend.core.security import API_KEY_HEADER, ApiKeyGate
from remitlend.presentation.api import build_api_router
from remitlend.presentation.api.routes.diagnostics import diagnostics_router
from remitlend.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization", API_KEY_HEADER]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration to build against; defaults to the
            environment-derived settings

    Returns:
        A fully wired application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging(settings.log_level, settings.log_format)

        logger = structlog.get_logger(__name__)
        if not app.state.api_key_gate.configured:
            logger.warning("internal_api_key_missing")
        logger.info(
            "application_started",
            version=__version__,
            environment=settings.environment,
        )

        yield

        logger.info("application_stopped")

    app = FastAPI(
        title="RemitLend Score Service",
        description="Mock credit score API for the RemitLend lending platform",
        version=__version__,
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    app.state.api_key_gate = ApiKeyGate(settings.internal_api_key)
    limiter = build_limiter(settings)
    app.state.limiter = limiter

    # Registered first so unhandled failures are formatted innermost.
    error_handler_middleware(app, settings.expose_internals)

    # Last added runs first: request context wraps everything.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestContextMiddleware)

    app.include_router(build_api_router(limiter, settings.rate_limit_strict))
    if settings.environment.lower() == "test":
        app.include_router(diagnostics_router)

    if settings.metrics_enabled:

        @app.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            """Prometheus metrics endpoint."""
            return Response(
                content=get_metrics(),
                media_type=get_metrics_content_type(),
            )

    @app.get("/", include_in_schema=False, response_class=PlainTextResponse)
    async def root() -> str:
        return "RemitLend Backend is running"

    return app


app = create_app()
