"""Tests for ContactService."""

import pytest
from loguru import logger

from models.schemas import ContactFormRequest
from services.contact_service import ContactService


@pytest.fixture
def log_messages():
    """Capture loguru output for the duration of a test."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, format="{level} {message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)


class TestSubmitContactForm:
    """Test cases for ContactService.submit_contact_form."""

    def test_success_text(self, valid_form: ContactFormRequest) -> None:
        result = ContactService.submit_contact_form(valid_form)
        assert result == "Your message has been sent successfully!"

    def test_success_text_azerbaijani(self, valid_form: ContactFormRequest) -> None:
        form = valid_form.model_copy(update={"lang": "az"})
        assert ContactService.submit_contact_form(form) == "Mesajınız uğurla göndərildi!"

    def test_success_unknown_language_is_empty(
        self, valid_form: ContactFormRequest
    ) -> None:
        form = valid_form.model_copy(update={"lang": "de"})
        assert ContactService.submit_contact_form(form) == ""

    def test_failure_text_is_localized(self, valid_form: ContactFormRequest) -> None:
        form = valid_form.model_copy(update={"subject": "Hi", "lang": "ru"})
        assert ContactService.submit_contact_form(form) == (
            "Количество символов в поле «Тема» не должно превышать 50!"
        )

    def test_failure_unknown_language_uses_english(
        self, valid_form: ContactFormRequest
    ) -> None:
        form = valid_form.model_copy(update={"email": "nope", "lang": "de"})
        assert ContactService.submit_contact_form(form) == (
            "Please enter a valid email address!"
        )

    def test_logs_outcome_without_personal_data(
        self, valid_form: ContactFormRequest, log_messages: list[str]
    ) -> None:
        form = valid_form.model_copy(update={"subject": "Secret subject"})
        ContactService.submit_contact_form(form)

        joined = "\n".join(log_messages)
        assert "reason=SubjectTooLong" in joined
        assert "lang=en" in joined
        assert valid_form.email not in joined
        assert valid_form.message not in joined
        assert "Secret subject" not in joined

    def test_logs_unsupported_language_as_other(
        self, valid_form: ContactFormRequest, log_messages: list[str]
    ) -> None:
        form = valid_form.model_copy(update={"lang": "<script>"})
        ContactService.submit_contact_form(form)

        joined = "\n".join(log_messages)
        assert "lang=other" in joined
        assert "<script>" not in joined
