from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FailureKind(str, Enum):
    """Reason a contact submission is rejected.

    Values double as catalog keys.
    """

    DEFAULT_ERROR = "DefaultError"
    EMPTY_FIELDS = "EmptyFields"
    NAME_TOO_LONG = "NameTooLong"
    EMAIL_REQUIRED = "EmailRequired"
    INVALID_EMAIL = "InvalidEmail"
    SUBJECT_TOO_LONG = "SubjectTooLong"
    MESSAGE_REQUIRED = "MessageRequired"
    MESSAGE_TOO_SHORT = "MessageTooShort"


# Contact Form Schemas
class ContactFormRequest(BaseModel):
    """A submitted contact form.

    Decoding is lenient in the same places existing clients rely on:
    a top-level JSON null is an empty form, keys match field names
    case-insensitively (the last matching key wins), missing keys and null
    values become empty strings, and unknown keys are ignored. Anything
    other than a string for a known key is rejected.
    """

    name: str = Field(default="", description="Sender name (optional)")
    email: str = Field(default="", description="Sender email address")
    subject: str = Field(default="", description="Message subject (optional)")
    message: str = Field(default="", description="Message body")
    lang: str = Field(default="", description="Response language: en, az or ru")

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def normalize_body(cls, data: Any) -> Any:
        """Map a null body to an empty form and fold key case."""
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data

        normalized: dict[str, Any] = {}
        for key, value in data.items():
            field = key.casefold() if isinstance(key, str) else key
            if field in cls.model_fields:
                normalized[field] = value
        return normalized

    @field_validator("name", "email", "subject", "message", "lang", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """Treat an explicit JSON null like an absent key."""
        return "" if v is None else v
