"""
Services layer for business logic.

This package contains service modules that encapsulate business logic
separate from the API routes.
"""

from .contact_service import ContactService
from .message_catalog import MessageCatalog

__all__ = [
    "ContactService",
    "MessageCatalog",
]
