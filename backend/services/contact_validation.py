"""Field validation for contact form submissions.

Rules are checked in a fixed order and the first match decides the outcome.
Some rules can never fire because an earlier rule already covers them
(an empty email or message is always reported as EMPTY_FIELDS); they are
kept so the order matches what existing clients expect.
"""

import re
from typing import Callable

from models.schemas import ContactFormRequest, FailureKind

NAME_MAX_LENGTH = 50
EMAIL_MIN_LENGTH = 7
EMAIL_MAX_LENGTH = 50
MESSAGE_MIN_LENGTH = 1

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def is_valid_email(email: str) -> bool:
    """Check the shape and length of an email address.

    Args:
        email: Address to check

    Returns:
        True if the whole string looks like local@domain.tld and is
        between 7 and 50 characters long
    """
    if not EMAIL_MIN_LENGTH <= len(email) <= EMAIL_MAX_LENGTH:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


Rule = tuple[Callable[[ContactFormRequest], bool], FailureKind]

# Order matters: first matching rule wins.
VALIDATION_RULES: tuple[Rule, ...] = (
    (lambda f: not f.email or not f.message, FailureKind.EMPTY_FIELDS),
    (lambda f: len(f.name) > NAME_MAX_LENGTH, FailureKind.NAME_TOO_LONG),
    (lambda f: not f.email, FailureKind.EMAIL_REQUIRED),
    (lambda f: not is_valid_email(f.email), FailureKind.INVALID_EMAIL),
    # Any subject at all is rejected, not only long ones.
    (lambda f: len(f.subject) > 0, FailureKind.SUBJECT_TOO_LONG),
    (lambda f: not f.message, FailureKind.MESSAGE_REQUIRED),
    (lambda f: len(f.message) < MESSAGE_MIN_LENGTH, FailureKind.MESSAGE_TOO_SHORT),
)


def validate_contact_form(form: ContactFormRequest) -> FailureKind | None:
    """Validate a submitted contact form.

    Args:
        form: The decoded submission

    Returns:
        The first failure kind that applies, or None if the form is valid
    """
    for predicate, kind in VALIDATION_RULES:
        if predicate(form):
            return kind
    return None
