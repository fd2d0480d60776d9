from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware, correlation_id
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import RequestResponseEndpoint

from src.tracker.api.routes.router import api_router
from src.tracker.core.config import get_settings
from src.tracker.core.db import check_connection, dispose_engine
from src.tracker.core.exceptions import setup_exception_handlers
from src.tracker.core.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from src.tracker.core.security import API_ONLY_CSP, DOCS_CSP, SecurityHeadersMiddleware
from src.tracker.core.shutdown import request_tracker

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}")

    # The API is useless without its store: refuse to start
    try:
        await check_connection()
    except Exception as e:
        logger.error("Database connection failed", error=str(e))
        raise SystemExit(1) from e
    logger.info("Database connection established")

    yield

    grace_period = settings.shutdown_grace_period
    logger.info("Shutdown initiated", in_flight=request_tracker.in_flight_count)
    request_tracker.start_shutdown()

    drained = await request_tracker.wait_for_drain(timeout=grace_period)
    if not drained:
        logger.warning(
            f"Shutdown timeout after {grace_period}s",
            in_flight=request_tracker.in_flight_count,
        )

    try:
        await dispose_engine()
    except Exception as e:
        logger.error("Database disconnection failed", error=str(e))
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "Registration and login"},
    {"name": "users", "description": "User profile and role administration"},
    {"name": "projects", "description": "Project CRUD scoped by ownership"},
    {"name": "health", "description": "Service health"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Project tracking API with JWT auth and owner/admin access control",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)

    @app.middleware("http")
    async def logging_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Bind request_id to log context for all requests."""
        clear_request_context()
        bind_request_context(correlation_id.get())
        try:
            return await call_next(request)
        finally:
            clear_request_context()

    @app.middleware("http")
    async def track_requests_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Track in-flight requests for graceful shutdown."""
        if request.url.path == "/health":
            return await call_next(request)

        async with request_tracker.track_request():
            return await call_next(request)

    # Last added runs first: the correlation id must be set before the
    # logging middleware above reads it
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )

    app.add_middleware(
        SecurityHeadersMiddleware,
        content_security_policy=DOCS_CSP if settings.enable_openapi else API_ONLY_CSP,
    )

    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(api_router)

    return app


app = create_app()
