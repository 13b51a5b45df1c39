from __future__ import annotations

import re

BASE_SCORE = 50
LENGTH_BONUS_STEPS = (10, 50, 100)
LENGTH_BONUS = 10
WORD_LENGTH_BONUS = 10
COMMON_WORD_POINTS = 2
COMMON_WORD_BONUS_CAP = 15
SPECIAL_CHAR_RATIO_LIMIT = 0.3
SPECIAL_CHAR_PENALTY = 20
SINGLE_CHAR_RATIO_LIMIT = 0.3
SINGLE_CHAR_PENALTY = 15

COMMON_WORDS = frozenset(
    {
        "the",
        "and",
        "to",
        "of",
        "a",
        "in",
        "is",
        "it",
        "you",
        "that",
        "he",
        "was",
        "for",
        "on",
        "are",
        "as",
        "with",
        "his",
        "they",
        "i",
    }
)

_SPECIAL_CHAR_RE = re.compile(r"[^a-zA-Z0-9\s]")


def estimate_confidence(text: str | None) -> int:
    """Score OCR output quality on a 0..100 scale.

    The score is a heuristic: longer text, plausible word lengths and common
    English words raise it; symbol noise and stray single characters lower it.
    """

    if not text:
        return 0

    score = BASE_SCORE
    for threshold in LENGTH_BONUS_STEPS:
        if len(text) > threshold:
            score += LENGTH_BONUS

    words = text.split()
    if words:
        average_length = sum(len(word) for word in words) / len(words)
        if 3 < average_length < 8:
            score += WORD_LENGTH_BONUS

    common_count = sum(1 for word in words if word.lower() in COMMON_WORDS)
    if common_count > 0:
        score += min(common_count * COMMON_WORD_POINTS, COMMON_WORD_BONUS_CAP)

    special_ratio = len(_SPECIAL_CHAR_RE.findall(text)) / len(text)
    if special_ratio > SPECIAL_CHAR_RATIO_LIMIT:
        score -= SPECIAL_CHAR_PENALTY

    single_chars = sum(1 for word in words if len(word) == 1)
    if single_chars > len(words) * SINGLE_CHAR_RATIO_LIMIT:
        score -= SINGLE_CHAR_PENALTY

    return clamp_score(score)


def clamp_score(score: int) -> int:
    if score < 0:
        return 0
    if score > 100:
        return 100
    return score
