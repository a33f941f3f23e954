"""Models package - Pydantic schemas, settings and domain exceptions."""

from .schemas import ContactFormRequest, FailureKind

__all__ = [
    "ContactFormRequest",
    "FailureKind",
]
