from __future__ import annotations

import logging
from collections.abc import Sequence

from ai_translator.domain.confidence import estimate_confidence
from ai_translator.domain.models import (
    OCR_METHOD_NONE,
    ExtractionRequest,
    ExtractionResult,
    ProviderText,
)
from ai_translator.domain.text_normalizer import count_words, normalize_text
from ai_translator.domain.validation import DEFAULT_MAX_IMAGE_BYTES, validate_extraction_request
from ai_translator.ports.ocr_port import OCRProviderPort
from ai_translator.services.provider_chain import ProgressCallback, run_provider_chain

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Server OCR failed. Falling back to client-side processing."
FALLBACK_SUGGESTIONS = (
    "Ensure the image has clear, high-contrast text",
    "Try with better lighting or focus",
    "Use a higher resolution image if possible",
)


class OCRService:
    def __init__(
        self,
        providers: Sequence[OCRProviderPort],
        max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
    ) -> None:
        self._providers = list(providers)
        self._max_image_bytes = max_image_bytes

    @property
    def provider_names(self) -> list[str]:
        return [provider.name for provider in self._providers]

    def extract(
        self,
        request: ExtractionRequest | None,
        progress_callback: ProgressCallback | None = None,
    ) -> ExtractionResult:
        request = validate_extraction_request(request, self._max_image_bytes)
        logger.info(
            "Processing OCR for image: %s (%d bytes)", request.filename, request.size_bytes
        )
        run = run_provider_chain(self._providers, request, "ocr", progress_callback)
        if not run.succeeded:
            logger.info("Server OCR failed, suggesting client-side processing")
            return fallback_result()
        return build_extraction_result(run.outcome.value)


def build_extraction_result(provider_text: ProviderText) -> ExtractionResult:
    text = normalize_text(provider_text.text)
    confidence = provider_text.confidence or 0
    if confidence <= 0:
        confidence = estimate_confidence(text)
    logger.info(
        "OCR successful via %s, extracted text length: %d", provider_text.method, len(text)
    )
    return ExtractionResult(
        text=text,
        method=provider_text.method,
        confidence=confidence,
        length=len(text),
        word_count=count_words(text),
    )


def fallback_result() -> ExtractionResult:
    return ExtractionResult(
        text="",
        method=OCR_METHOD_NONE,
        confidence=0,
        length=0,
        word_count=0,
        fallback=True,
        message=FALLBACK_MESSAGE,
        suggestions=FALLBACK_SUGGESTIONS,
    )
