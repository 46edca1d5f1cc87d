"""
FastAPI application factory for the Luhn Validation Server.

Builds the app, its exception handlers and request logging for one Settings value.
"""

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from . import __version__
from .config import Settings
from .errors import (
    INTERNAL_ERROR_MESSAGE,
    METHOD_NOT_ALLOWED_MESSAGE,
    PlainTextHTTPError,
)
from .routes import router

logger = structlog.get_logger(__name__)


# ============================================================================
# Logging
# ============================================================================

def configure_logging(settings: Settings) -> None:
    """
    Configure structlog and the stdlib root logger from settings.
    """
    logging.basicConfig(format="%(message)s", level=settings.log_level)
    logging.getLogger().setLevel(settings.log_level)

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer() if settings.log_format == "json"
            else structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Loggers re-read the config so a rebuilt app can switch renderers
        cache_logger_on_first_use=False,
    )


def plain_text_error(
    message: str,
    status_code: int,
    headers: Optional[dict] = None
) -> PlainTextResponse:
    """
    Build a plain-text error response with a trailing newline.
    """
    response_headers = {"X-Content-Type-Options": "nosniff"}
    if headers:
        response_headers.update(headers)

    return PlainTextResponse(
        content=f"{message}\n",
        status_code=status_code,
        headers=response_headers
    )


# ============================================================================
# Exception Handlers
# ============================================================================

def register_exception_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""

    @app.exception_handler(PlainTextHTTPError)
    async def plain_text_error_handler(request: Request, exc: PlainTextHTTPError):
        """
        Handle service errors with their fixed plain-text message.
        """
        logger.info(
            "request_rejected",
            path=request.url.path,
            status_code=exc.status_code,
            error=exc.detail
        )

        return plain_text_error(exc.detail, exc.status_code, exc.headers)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Handle router errors (unknown path, wrong method) as plain text.
        """
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            message = METHOD_NOT_ALLOWED_MESSAGE
        else:
            message = str(exc.detail)

        logger.info(
            "http_error_response",
            method=request.method,
            path=request.url.path,
            status_code=exc.status_code
        )

        return plain_text_error(message, exc.status_code, exc.headers)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """
        Handle unexpected errors with generic 500 response.
        """
        logger.error(
            "internal_server_error",
            path=request.url.path,
            error=str(exc),
            exc_info=True
        )

        return plain_text_error(
            INTERNAL_ERROR_MESSAGE,
            status.HTTP_500_INTERNAL_SERVER_ERROR
        )


# ============================================================================
# Application Factory
# ============================================================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to run with; loaded from the environment if omitted

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = Settings()

    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup and shutdown events.
        """
        logger.info(
            "starting_luhn_validation_server",
            version=__version__,
            environment=settings.env,
            port=settings.server_port,
            strict_digits=settings.strict_digits
        )
        try:
            yield
        finally:
            logger.info("server_shutdown_complete")

    app = FastAPI(
        title="Luhn Validation Server",
        description="Validates card numbers against the Luhn checksum.",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None
    )
    app.state.settings = settings

    register_exception_handlers(app)
    app.include_router(router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """
        Log all incoming requests and responses.
        """
        logger.info(
            "request_received",
            method=request.method,
            path=request.url.path,
            client=request.client.host if request.client else None
        )

        response = await call_next(request)

        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code
        )

        return response

    return app


# ============================================================================
# Export
# ============================================================================

__all__ = ["create_app", "configure_logging"]
