from __future__ import annotations

import sys
from pathlib import Path

from dotenv import load_dotenv

_SRC_ROOT = Path(__file__).resolve().parents[2]
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))
load_dotenv(_SRC_ROOT.parent / ".env", override=False)

import streamlit as st

from ai_translator.container import build_services
from ai_translator.domain.errors import TranslatorError
from ai_translator.domain.languages import LANGUAGE_NAMES
from ai_translator.domain.models import ExtractionRequest, TranslationRequest
from ai_translator.logging_config import configure_logging
from ai_translator.settings import LOG_LEVEL, OCR_HISTORY_LIMIT, TRANSLATION_HISTORY_LIMIT
from ai_translator.ui_streamlit.session import (
    init_session_state,
    ocr_history,
    record_extraction,
    record_translation,
    translation_history,
)


def _get_services():
    if st.session_state["services"] is None:
        st.session_state["services"] = build_services()
    return st.session_state["services"]


def _trigger_rerun() -> None:
    if hasattr(st, "rerun"):
        st.rerun()
    else:
        st.experimental_rerun()


def _translate(text: str) -> None:
    if not text.strip():
        return
    services = _get_services()
    request = TranslationRequest(
        text=text.strip(), target_language=st.session_state["target_language"]
    )
    st.session_state["error"] = None
    with st.spinner("Translating..."):
        try:
            result = services["translation_service"].translate(request)
        except TranslatorError as exc:
            st.session_state["error"] = f"Failed to translate text. {exc}"
            return
    record_translation(st.session_state, text, result)


def _render_language_selector() -> None:
    codes = list(LANGUAGE_NAMES.keys())
    current = st.session_state["target_language"]
    st.session_state["target_language"] = st.selectbox(
        "Translate to",
        codes,
        index=codes.index(current) if current in codes else 0,
        format_func=lambda code: LANGUAGE_NAMES[code],
    )


def _render_image_tab() -> None:
    uploaded = st.file_uploader("Upload or capture an image", type=["png", "jpg", "jpeg", "webp"])
    captured = st.camera_input("Or take a photo")
    image = captured or uploaded
    if image is None or not st.button("Extract text"):
        return
    services = _get_services()
    request = ExtractionRequest.from_bytes(
        image.getvalue(), image.type or "", filename=image.name
    )
    with st.spinner("Extracting text..."):
        try:
            result = services["ocr_service"].extract(request)
            if result.fallback:
                st.info(result.message)
                for suggestion in result.suggestions:
                    st.caption(f"- {suggestion}")
                result = services["local_ocr_service"].extract(request)
        except TranslatorError as exc:
            st.error(str(exc))
            return
    record_extraction(st.session_state, image.name, result)
    if result.fallback:
        st.error("No text could be extracted from this image.")
        return
    st.success(
        f"Extracted {result.word_count} words via {result.method} "
        f"(confidence {result.confidence}%)."
    )
    st.session_state["current_text"] = result.text
    _translate(result.text)


def _render_text_tab() -> None:
    text = st.text_area("Text to translate", value=st.session_state["current_text"])
    if st.button("Translate"):
        st.session_state["current_text"] = text
        _translate(text)


def _render_result() -> None:
    if st.session_state["error"]:
        st.error(st.session_state["error"])
    result = st.session_state["translation"]
    if result is None:
        return
    st.subheader("Translation")
    st.write(result.translation)
    st.caption(f"{LANGUAGE_NAMES.get(result.target_language, result.target_language)} via {result.service}")
    if st.session_state["current_text"] and st.button("Retranslate"):
        _translate(st.session_state["current_text"])
        _trigger_rerun()


def _render_history_tab() -> None:
    history = translation_history(st.session_state)
    if not len(history):
        st.write("No translation history yet")
    else:
        if st.button("Clear history"):
            history.clear()
            _trigger_rerun()
        for entry in history:
            with st.expander(f"{entry.original[:40]} -> {entry.text[:40]}"):
                st.write(entry.original)
                st.write(entry.text)
                st.caption(f"{entry.metadata.get('targetLanguage')} · {entry.timestamp}")
                if st.button("Delete", key=f"delete_{entry.id}"):
                    history.remove(entry.id)
                    _trigger_rerun()
    scans = ocr_history(st.session_state)
    if len(scans):
        st.subheader("Recent scans")
        for entry in scans:
            st.caption(
                f"{entry.original}: {entry.metadata.get('method')} "
                f"({entry.metadata.get('confidence')}%) {entry.text[:60]}"
            )


def main() -> None:
    configure_logging(LOG_LEVEL)
    st.set_page_config(page_title="AI Translator")
    init_session_state(st.session_state, TRANSLATION_HISTORY_LIMIT, OCR_HISTORY_LIMIT)
    st.title("AI Translator")
    _render_language_selector()
    image_tab, text_tab, history_tab = st.tabs(["Image OCR", "Text", "History"])
    with image_tab:
        _render_image_tab()
    with text_tab:
        _render_text_tab()
    with history_tab:
        _render_history_tab()
    _render_result()


main()
