from ai_translator.domain.models import ExtractionResult, TranslationResult
from ai_translator.services.ocr_service import fallback_result
from ai_translator.ui_streamlit.session import (
    init_session_state,
    ocr_history,
    record_extraction,
    record_translation,
    translation_history,
)


def test_init_session_state_is_idempotent() -> None:
    state: dict = {}
    init_session_state(state, translation_limit=50, ocr_limit=20)
    history = translation_history(state)
    init_session_state(state, translation_limit=5, ocr_limit=5)

    assert translation_history(state) is history
    assert translation_history(state).capacity == 50
    assert ocr_history(state).capacity == 20


def test_record_translation_updates_state_and_history() -> None:
    state: dict = {}
    init_session_state(state, translation_limit=2, ocr_limit=2)
    result = TranslationResult("hola", "auto", "es", "simple")

    entry = record_translation(state, " hello ", result)

    assert state["translation"] is result
    assert entry.original == "hello"
    assert entry.text == "hola"
    assert entry.metadata == {"targetLanguage": "es", "service": "simple"}


def test_record_extraction_skips_fallback_results() -> None:
    state: dict = {}
    init_session_state(state, translation_limit=2, ocr_limit=2)

    assert record_extraction(state, "blank.png", fallback_result()) is None
    assert len(ocr_history(state)) == 0

    result = ExtractionResult(
        text="Exit", method="tesseract", confidence=60, length=4, word_count=1
    )
    entry = record_extraction(state, "sign.png", result)

    assert entry is not None
    assert entry.metadata["method"] == "tesseract"
    assert state["last_extraction"] is result
