# ruff: noqa: E402
# E402 disabled: load_dotenv() must run before other imports for Sentry DSN

import time
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()

import sentry_sdk
import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import PlainTextResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from core.correlation import (
    CORRELATION_HEADER,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from core.logging_config import configure_logging
from core.sentry_config import init_sentry
from helpers.cors_headers import CORSHeadersMiddleware, cors_headers
from helpers.language import DEFAULT_LANGUAGE
from helpers.security_headers import SecurityHeadersMiddleware
from models.config import settings
from models.exceptions import DomainException, MethodNotAllowedException
from models.schemas import FailureKind
from routers import contact_router
from services.message_catalog import MessageCatalog

# Initialize Sentry BEFORE app creation
init_sentry()

# Configure logging with Loguru
configure_logging(settings.ENVIRONMENT, settings.LOG_DIR)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(
        f"Contact API starting: environment={settings.ENVIRONMENT} "
        f"allowed_origin={settings.CORS_ALLOWED_ORIGIN}"
    )
    yield
    logger.info("Contact API stopped")


app = FastAPI(title="Contact Form API", lifespan=lifespan)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Inject correlation ID into request context and Sentry."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Process request with correlation ID tracking."""
        correlation_id = (
            request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        )
        set_correlation_id(correlation_id)

        sentry_sdk.set_tag("correlation_id", correlation_id)

        response = await call_next(request)

        response.headers[CORRELATION_HEADER] = correlation_id

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log all incoming requests with performance monitoring."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Process request and log timing information."""
        start_time = time.perf_counter()

        client_host = request.client.host if request.client else "unknown"
        logger.info(f"Request: {request.method} {request.url.path} from {client_host}")

        response = await call_next(request)

        duration = time.perf_counter() - start_time

        logger.info(
            f"Response: {request.method} {request.url.path} "
            f"status={response.status_code} duration={duration:.3f}s"
        )

        if duration > settings.SLOW_REQUEST_THRESHOLD:
            logger.warning(
                f"Slow request: {request.method} {request.url.path} "
                f"took {duration:.2f}s (threshold: {settings.SLOW_REQUEST_THRESHOLD}s)"
            )

        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        return response


# Middleware runs in reverse order of registration: CORS is added last so
# preflight requests are answered before anything else runs.
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CORSHeadersMiddleware)


# Global unhandled exception handler (returns generic 500 and logs details)
@app.exception_handler(Exception)
async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> PlainTextResponse:
    """Catch all unhandled exceptions with full Sentry capture."""
    correlation_id = get_correlation_id() or generate_correlation_id()

    sentry_sdk.set_tag("correlation_id", correlation_id)
    sentry_sdk.capture_exception(exc)

    # Use repr() to escape curly braces in exception message
    # (loguru's .format() interprets them as placeholders otherwise)
    logger.exception(
        f"Unhandled exception: {exc!r}",
        correlation_id=correlation_id,
        path=str(request.url.path),
        method=request.method,
    )

    # This handler runs outside the middleware stack, so add CORS headers here
    lang = getattr(request.state, "lang", DEFAULT_LANGUAGE)
    return PlainTextResponse(
        MessageCatalog.resolve_failure_text(FailureKind.DEFAULT_ERROR, lang),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers={**cors_headers(), CORRELATION_HEADER: correlation_id},
    )


@app.exception_handler(DomainException)
async def domain_exception_handler(
    request: Request, exc: DomainException
) -> PlainTextResponse:
    """Render domain exceptions as plain text with their status code."""
    sentry_sdk.set_tag("correlation_id", exc.correlation_id)
    sentry_sdk.set_tag("exception_type", exc.__class__.__name__)

    logger.warning(
        f"Request rejected: {exc.message}",
        correlation_id=exc.correlation_id,
        exception_type=exc.__class__.__name__,
        path=str(request.url.path),
    )

    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Render routing errors (404, 405 for unusual methods) as plain text."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return await domain_exception_handler(request, MethodNotAllowedException())

    logger.warning(
        f"HTTP {exc.status_code}: {request.method} {request.url.path}",
        path=str(request.url.path),
    )

    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


app.include_router(contact_router.router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
