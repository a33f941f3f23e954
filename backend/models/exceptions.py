"""
Custom domain exceptions for the application.

These exceptions are raised by routers and services and converted to
plain-text HTTP responses by centralized exception handlers in main.py.

Form validation failures are NOT exceptions: they are answered with
HTTP 200 and a localized message (see services.contact_service).
"""

from core.correlation import generate_correlation_id, get_correlation_id


class DomainException(Exception):
    """
    Base class for all domain exceptions.

    Attributes:
        message: Human-readable error message, sent as the response body.
        correlation_id: Unique ID for error tracking (auto-generated if not provided).
    """

    status_code: int = 500

    def __init__(self, message: str, correlation_id: str | None = None):
        self.message = message
        # Use request correlation ID if available, otherwise generate new one
        self.correlation_id = (
            correlation_id or get_correlation_id() or generate_correlation_id()
        )
        super().__init__(self.message)


class BadRequestException(DomainException):
    """Raised when the request body cannot be used."""

    status_code = 400


class UnreadableBodyException(BadRequestException):
    """Raised when the request body could not be read from the client."""

    def __init__(self, correlation_id: str | None = None):
        super().__init__("Unable to read body", correlation_id)


class InvalidJSONException(BadRequestException):
    """Raised when the body is not a JSON object with string fields."""

    def __init__(self, correlation_id: str | None = None):
        super().__init__("Invalid JSON", correlation_id)


class MethodNotAllowedException(DomainException):
    """Raised for any method other than POST on the contact endpoint."""

    status_code = 405

    def __init__(self, correlation_id: str | None = None):
        super().__init__("Invalid request method", correlation_id)
