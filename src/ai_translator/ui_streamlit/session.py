from __future__ import annotations

from collections.abc import MutableMapping

from ai_translator.domain.history import BoundedHistory
from ai_translator.domain.models import ExtractionResult, HistoryEntry, TranslationResult

TRANSLATION_HISTORY_KEY = "translation_history"
OCR_HISTORY_KEY = "ocr_history"


def init_session_state(
    state: MutableMapping,
    translation_limit: int,
    ocr_limit: int,
) -> None:
    state.setdefault("services", None)
    state.setdefault("target_language", "es")
    state.setdefault("current_text", "")
    state.setdefault("translation", None)
    state.setdefault("last_extraction", None)
    state.setdefault("error", None)
    state.setdefault(TRANSLATION_HISTORY_KEY, BoundedHistory(translation_limit))
    state.setdefault(OCR_HISTORY_KEY, BoundedHistory(ocr_limit))


def translation_history(state: MutableMapping) -> BoundedHistory:
    return state[TRANSLATION_HISTORY_KEY]


def ocr_history(state: MutableMapping) -> BoundedHistory:
    return state[OCR_HISTORY_KEY]


def record_translation(
    state: MutableMapping, original: str, result: TranslationResult
) -> HistoryEntry:
    state["translation"] = result
    return translation_history(state).record(
        original.strip(),
        result.translation,
        targetLanguage=result.target_language,
        service=result.service,
    )


def record_extraction(
    state: MutableMapping, source_name: str, result: ExtractionResult
) -> HistoryEntry | None:
    state["last_extraction"] = result
    if result.fallback or not result.text:
        return None
    return ocr_history(state).record(
        source_name,
        result.text,
        method=result.method,
        confidence=result.confidence,
        wordCount=result.word_count,
    )
