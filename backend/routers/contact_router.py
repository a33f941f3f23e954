"""Contact form router for handling user inquiries."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from loguru import logger
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from models.exceptions import (
    InvalidJSONException,
    MethodNotAllowedException,
    UnreadableBodyException,
)
from models.schemas import ContactFormRequest
from services.contact_service import ContactService

router = APIRouter(tags=["contact"])

# OPTIONS is answered by the CORS middleware before routing.
REJECTED_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE"]


async def _read_contact_form(request: Request) -> ContactFormRequest:
    """Read and decode the request body.

    Raises:
        UnreadableBodyException: If the client went away mid-body
        InvalidJSONException: If the body is not a JSON object of strings
    """
    try:
        body = await request.body()
    except ClientDisconnect as e:
        raise UnreadableBodyException() from e

    try:
        return ContactFormRequest.model_validate_json(body)
    except ValidationError as e:
        logger.debug(f"Rejected contact body: {e.error_count()} error(s)")
        raise InvalidJSONException() from e


@router.post("/", response_class=PlainTextResponse)
@router.post("/{path:path}", response_class=PlainTextResponse, include_in_schema=False)
async def submit_contact_form(request: Request) -> PlainTextResponse:
    """Submit a contact form.

    Every path is served, so the form can be posted to / or any sub-path.
    The body is read by hand so malformed input gets the plain-text
    "Invalid JSON" answer instead of FastAPI's 422 payload.

    Returns:
        200 with the localized success text or the localized reason the
        submission was rejected

    Raises:
        UnreadableBodyException: 400 (handled by global exception handler)
        InvalidJSONException: 400 (handled by global exception handler)
    """
    form = await _read_contact_form(request)

    # Lets the unhandled-exception handler answer in the client's language
    request.state.lang = form.lang

    return PlainTextResponse(ContactService.submit_contact_form(form))


@router.api_route("/{path:path}", methods=REJECTED_METHODS, include_in_schema=False)
async def reject_method(request: Request) -> None:
    """Only POST is accepted on the contact endpoint."""
    raise MethodNotAllowedException()
