from __future__ import annotations

import re

_NEWLINE_RUN_RE = re.compile(r"\n+")
_WHITESPACE_RUN_RE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """Collapse line breaks and whitespace runs into single spaces."""

    if not text:
        return ""
    cleaned = text.replace("\r\n", "\n")
    cleaned = _NEWLINE_RUN_RE.sub(" ", cleaned)
    cleaned = _WHITESPACE_RUN_RE.sub(" ", cleaned)
    return cleaned.strip()


def count_words(text: str | None) -> int:
    if not text:
        return 0
    return len([word for word in text.split() if word])
