"""Contact form service for handling user inquiries.

Validates a submission and picks the localized text to send back.
Nothing is stored or forwarded.
"""

from loguru import logger

from helpers.language import language_for_logging
from models.schemas import ContactFormRequest
from services.contact_validation import validate_contact_form
from services.message_catalog import MessageCatalog


class ContactService:
    """Service for handling contact form submissions."""

    @classmethod
    def submit_contact_form(cls, form: ContactFormRequest) -> str:
        """Process a contact form submission.

        Validation failures are not errors here: the caller gets the
        localized failure text just like it gets the success text.

        Args:
            form: The decoded contact form data

        Returns:
            Localized failure text, or the localized success text
        """
        lang = language_for_logging(form.lang)
        failure = validate_contact_form(form)

        if failure is not None:
            logger.info(f"Contact form rejected: reason={failure.value} lang={lang}")
            return MessageCatalog.resolve_failure_text(failure, form.lang)

        logger.info(f"Contact form accepted: lang={lang}")
        success_text = MessageCatalog.resolve_success_text(form.lang)
        if not success_text:
            logger.debug("No success text for requested language, sending empty body")
        return success_text
