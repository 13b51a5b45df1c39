from __future__ import annotations

from typing import Any

from ai_translator.adapters.google_vision_adapter import GoogleVisionAdapter
from ai_translator.adapters.llm_chat_adapter import ChatCompletionTranslationAdapter
from ai_translator.adapters.mymemory_adapter import MyMemoryAdapter
from ai_translator.adapters.ocr_space_adapter import OCRSpaceAdapter
from ai_translator.adapters.ocr_tesseract_adapter import TesseractOCRAdapter
from ai_translator.adapters.static_phrase_adapter import StaticPhraseAdapter
from ai_translator.services.ocr_service import OCRService
from ai_translator.services.translation_service import TranslationService
from ai_translator.settings import (
    DEEPSEEK_API_KEY,
    GOOGLE_VISION_API_KEY,
    GOOGLE_VISION_URL,
    MAX_IMAGE_BYTES,
    MYMEMORY_URL,
    OCR_ENGINE,
    OCR_LANGUAGE,
    OCR_SPACE_API_KEY,
    OCR_SPACE_URL,
    PROVIDER_TIMEOUT_SECONDS,
    TESSERACT_LANG,
    TRANSLATION_BASE_URL,
    TRANSLATION_MODEL,
    TRANSLATION_PROVIDER,
)


def build_services() -> dict[str, Any]:
    ocr_providers: list[Any] = [
        OCRSpaceAdapter(
            api_key=OCR_SPACE_API_KEY,
            url=OCR_SPACE_URL,
            language=OCR_LANGUAGE,
            engine=OCR_ENGINE,
            timeout=PROVIDER_TIMEOUT_SECONDS,
        )
    ]
    if GOOGLE_VISION_API_KEY:
        ocr_providers.append(
            GoogleVisionAdapter(
                api_key=GOOGLE_VISION_API_KEY,
                url=GOOGLE_VISION_URL,
                timeout=PROVIDER_TIMEOUT_SECONDS,
            )
        )
    translation_providers = [
        ChatCompletionTranslationAdapter.from_preset(
            TRANSLATION_PROVIDER,
            api_key=DEEPSEEK_API_KEY,
            base_url=TRANSLATION_BASE_URL,
            model=TRANSLATION_MODEL,
            timeout=PROVIDER_TIMEOUT_SECONDS,
        ),
        MyMemoryAdapter(url=MYMEMORY_URL, timeout=PROVIDER_TIMEOUT_SECONDS),
        StaticPhraseAdapter(),
    ]
    return {
        "ocr_service": OCRService(ocr_providers, max_image_bytes=MAX_IMAGE_BYTES),
        "local_ocr_service": OCRService(
            [TesseractOCRAdapter(language=TESSERACT_LANG)],
            max_image_bytes=MAX_IMAGE_BYTES,
        ),
        "translation_service": TranslationService(translation_providers),
    }
