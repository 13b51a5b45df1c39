from __future__ import annotations

STATIC_PHRASES: dict[str, dict[str, str]] = {
    "hello": {
        "es": "hola",
        "fr": "bonjour",
        "de": "hallo",
        "it": "ciao",
        "pt": "olá",
        "ru": "привет",
        "ja": "こんにちは",
        "ko": "안녕하세요",
        "zh": "你好",
        "ar": "مرحبا",
        "hi": "नमस्ते",
    },
    "goodbye": {
        "es": "adiós",
        "fr": "au revoir",
        "de": "auf wiedersehen",
        "it": "ciao",
        "pt": "tchau",
        "ru": "до свидания",
        "ja": "さようなら",
        "ko": "안녕히 가세요",
        "zh": "再见",
        "ar": "وداعا",
        "hi": "अलविदा",
    },
    "thank you": {
        "es": "gracias",
        "fr": "merci",
        "de": "danke",
        "it": "grazie",
        "pt": "obrigado",
        "ru": "спасибо",
        "ja": "ありがとう",
        "ko": "감사합니다",
        "zh": "谢谢",
        "ar": "شكرا",
        "hi": "धन्यवाद",
    },
    "please": {
        "es": "por favor",
        "fr": "s'il vous plaît",
        "de": "bitte",
        "it": "per favore",
        "pt": "por favor",
        "ru": "пожалуйста",
        "ja": "お願いします",
        "ko": "부탁합니다",
        "zh": "请",
        "ar": "من فضلك",
        "hi": "कृपया",
    },
    "yes": {
        "es": "sí",
        "fr": "oui",
        "de": "ja",
        "it": "sì",
        "pt": "sim",
        "ru": "да",
        "ja": "はい",
        "ko": "예",
        "zh": "是",
        "ar": "نعم",
        "hi": "हाँ",
    },
    "no": {
        "es": "no",
        "fr": "non",
        "de": "nein",
        "it": "no",
        "pt": "não",
        "ru": "нет",
        "ja": "いいえ",
        "ko": "아니요",
        "zh": "不",
        "ar": "لا",
        "hi": "नहीं",
    },
}


def lookup_phrase(
    text: str | None,
    target_language: str | None,
    table: dict[str, dict[str, str]] | None = None,
) -> str | None:
    """Return the canned translation for a known phrase, or None."""

    if not text or not target_language:
        return None
    phrases = STATIC_PHRASES if table is None else table
    translations = phrases.get(text.strip().lower())
    if translations is None:
        return None
    return translations.get(target_language)
