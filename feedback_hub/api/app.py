"""
FastAPI application factory.
"""

import time
import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from feedback_hub import __version__
from feedback_hub.api.routes import feedback, health
from feedback_hub.config.settings import get_settings
from feedback_hub.feedback.config import FeedbackConfig
from feedback_hub.feedback.errors import FeedbackError, ValidationError
from feedback_hub.feedback.repository import FeedbackRepository
from feedback_hub.observability.logging import bind_context, clear_context
from feedback_hub.storage.database import Database

logger = structlog.get_logger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body."
SERVER_ERROR_MESSAGE = "Server error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database on startup and release it on shutdown.

    A failed connection is logged and the server still starts; requests
    that need the store then fail with 500 until it is reachable.
    """
    logger.info("Feedback API starting up")
    database: Database = app.state.database

    try:
        await database.connect()
        await FeedbackRepository(database).create_tables()
    except Exception as e:
        logger.error("Database unavailable at startup", error=str(e))

    yield

    logger.info("Feedback API shutting down")
    await database.close()


def create_app(
    database: Database | None = None,
    feedback_config: FeedbackConfig | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Database handle to use. A new one is built from settings if omitted.
        feedback_config: Feedback validation config. Loaded from env if omitted.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    app = FastAPI(
        title="Feedback Hub API",
        description="Collect user feedback and report aggregate ratings.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "Service health checks"},
            {"name": "feedback", "description": "Feedback submission, listing, and analytics"},
        ],
    )
    app.state.database = database if database is not None else Database()
    app.state.feedback_config = feedback_config or FeedbackConfig()

    # CORS origins from CORS_ORIGINS env var, comma-separated
    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Request logging and correlation ID
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = (
            request.headers.get("X-Request-ID")
            or request.headers.get("X-Correlation-ID")
            or str(uuid.uuid4())
        )
        bind_context(request_id=request_id)
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
            duration = time.perf_counter() - start_time
            response.headers["X-Request-ID"] = request_id

            logger.info(
                "HTTP request",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
            )
            return response
        finally:
            clear_context()

    @app.exception_handler(FeedbackError)
    async def feedback_error_handler(request: Request, exc: FeedbackError):
        status_code = 400 if isinstance(exc, ValidationError) else 500
        return JSONResponse(status_code=status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("Malformed request body", errors=exc.errors())
        return JSONResponse(status_code=400, content={"message": INVALID_BODY_MESSAGE})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"message": SERVER_ERROR_MESSAGE})

    app.include_router(health.router, tags=["health"])
    app.include_router(feedback.router, tags=["feedback"])

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "service": "Feedback Hub API",
            "version": __version__,
            "docs": "/docs",
        }

    return app
