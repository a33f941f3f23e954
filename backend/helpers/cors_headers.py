"""
CORS middleware for the contact endpoint.

Unlike Starlette's CORSMiddleware, the headers are sent on every response
whether or not the request carried an Origin header, and every OPTIONS
request is answered as a preflight.
"""

from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from models.config import settings

ALLOWED_METHODS = "POST"
ALLOWED_HEADERS = "Content-Type"


def cors_headers() -> dict[str, str]:
    """Build the CORS headers for the configured origin."""
    return {
        "Access-Control-Allow-Origin": settings.CORS_ALLOWED_ORIGIN,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Add fixed CORS headers and short-circuit preflight requests."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Answer OPTIONS directly, otherwise decorate the downstream response."""
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=cors_headers())

        response = await call_next(request)
        response.headers.update(cors_headers())
        return response
