"""
Security headers middleware for FastAPI.

The API only ever returns short plain-text bodies, so the policy is
locked down completely.
"""

from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from models.config import settings

SECURITY_HEADERS = {
    # Prevent MIME type sniffing of the text/plain bodies
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds security headers to all responses.

    Headers added:
    - X-Content-Type-Options, X-Frame-Options, Referrer-Policy
    - Content-Security-Policy: nothing may be loaded or framed
    - Cache-Control: no-store unless the response already set one
    - Strict-Transport-Security: production only
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Add security headers to the response."""
        response = await call_next(request)

        response.headers.update(SECURITY_HEADERS)

        # max-age=31536000 = 1 year
        if settings.ENVIRONMENT == "production":
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        if "Cache-Control" not in response.headers:
            response.headers["Cache-Control"] = "no-store"

        return response
