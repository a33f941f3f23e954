"""Localized response texts for the contact endpoint.

Holds the failure texts keyed by failure kind and language, and the
success text keyed by language. Both tables are read-only.
"""

from types import MappingProxyType
from typing import Mapping

from helpers.language import DEFAULT_LANGUAGE
from models.schemas import FailureKind

UNKNOWN_ERROR_TEXT = "An unknown error occurred!"


def _freeze(
    table: dict[FailureKind, dict[str, str]],
) -> Mapping[FailureKind, Mapping[str, str]]:
    return MappingProxyType(
        {kind: MappingProxyType(texts) for kind, texts in table.items()}
    )


class MessageCatalog:
    """Static lookup of response texts by failure kind and language."""

    FAILURE_TEXTS: Mapping[FailureKind, Mapping[str, str]] = _freeze(
        {
            FailureKind.DEFAULT_ERROR: {
                "en": "An error occurred while processing the request!",
                "az": "Tələbi işlənən zaman səhv baş verdi!",
                "ru": "При обработке запроса произошла ошибка!",
            },
            FailureKind.EMPTY_FIELDS: {
                "en": "Please fill in all the fields!",
                "az": "Bütün tələb olunan sahələri doldurun!",
                "ru": "Заполните все обязательные поля!",
            },
            FailureKind.NAME_TOO_LONG: {
                "en": "The number of characters in the «Name» field must be no more than 50!",
                "az": "«Ad» sahəsindəki simvolların sayı 50-dən çox olmamalıdır!",
                "ru": "Количество символов в поле «Имя» не должно превышать 50!",
            },
            FailureKind.EMAIL_REQUIRED: {
                "en": "The «Email» field is required!",
                "az": "«Email» sahəsi tələb olunur!",
                "ru": "Поле «Email» обязательно!",
            },
            FailureKind.INVALID_EMAIL: {
                "en": "Please enter a valid email address!",
                "az": "Zəhmət olmasa düzgün bir email ünvanı daxil edin!",
                "ru": "Пожалуйста, введите действительный адрес электронной почты!",
            },
            FailureKind.SUBJECT_TOO_LONG: {
                "en": "The number of characters in the «Subject» field must be no more than 50!",
                "az": "«Mövzu» sahəsindəki simvolların sayı 50-dən çox olmamalıdır!",
                "ru": "Количество символов в поле «Тема» не должно превышать 50!",
            },
            FailureKind.MESSAGE_REQUIRED: {
                "en": "The «Message» field is required!",
                "az": "«Mesaj» sahəsi tələb olunur!",
                "ru": "Поле «Сообщение» обязательно!",
            },
            FailureKind.MESSAGE_TOO_SHORT: {
                "en": "The message must be at least 1 character long!",
                "az": "Mesaj ən az 1 simvol uzunluğunda olmalıdır!",
                "ru": "Сообщение должно быть длиной не менее 1 символа!",
            },
        }
    )

    SUCCESS_TEXTS: Mapping[str, str] = MappingProxyType(
        {
            "en": "Your message has been sent successfully!",
            "az": "Mesajınız uğurla göndərildi!",
            "ru": "Ваше сообщение успешно отправлено!",
        }
    )

    @classmethod
    def resolve_failure_text(cls, kind: FailureKind | str, lang: str) -> str:
        """Get the failure text for a kind in the requested language.

        Falls back to the English text for an unknown language, and to a
        generic message for a kind the catalog has no entries for.

        Args:
            kind: Failure kind (or its string value)
            lang: Requested language code

        Returns:
            Human-readable failure text
        """
        texts = cls.FAILURE_TEXTS.get(kind)  # type: ignore[call-overload]
        if not texts:
            return UNKNOWN_ERROR_TEXT
        return texts.get(lang, texts[DEFAULT_LANGUAGE])

    @classmethod
    def resolve_success_text(cls, lang: str) -> str:
        """Get the success text for a language.

        There is no fallback: an unsupported language yields an empty string.
        """
        return cls.SUCCESS_TEXTS.get(lang, "")
