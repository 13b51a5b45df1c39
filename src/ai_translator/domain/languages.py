from __future__ import annotations

UNKNOWN_LANGUAGE = "Unknown Language"

LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese (Simplified)",
    "ar": "Arabic",
    "hi": "Hindi",
}


def language_name(code: str | None) -> str:
    """Resolve a language code to its English name.

    Unknown codes resolve to ``UNKNOWN_LANGUAGE`` rather than raising; callers
    still pass the result on to the translation prompt.
    """

    if not code:
        return UNKNOWN_LANGUAGE
    return LANGUAGE_NAMES.get(code, UNKNOWN_LANGUAGE)


def list_languages() -> list[dict[str, str]]:
    return [{"code": code, "name": name} for code, name in LANGUAGE_NAMES.items()]
