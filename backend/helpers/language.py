"""Language utility functions."""

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "az", "ru")


def is_supported_language(lang: str) -> bool:
    """
    Check whether a language code has its own catalog entries.

    Codes are matched exactly: "EN" or "ru-RU" are not supported.
    """
    return lang in SUPPORTED_LANGUAGES


def language_for_logging(lang: str) -> str:
    """
    Return a short, safe representation of a client-supplied language code.

    Unsupported codes are reported as "other" so arbitrary client input
    never ends up in the logs.
    """
    return lang if is_supported_language(lang) else "other"
