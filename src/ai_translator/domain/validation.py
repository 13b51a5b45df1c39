from __future__ import annotations

from ai_translator.domain.errors import InputValidationError
from ai_translator.domain.models import ExtractionRequest, TranslationRequest

DEFAULT_MAX_IMAGE_BYTES = 10 * 1024 * 1024


def validate_extraction_request(
    request: ExtractionRequest | None, max_bytes: int = DEFAULT_MAX_IMAGE_BYTES
) -> ExtractionRequest:
    if request is None:
        raise InputValidationError("No image file provided")
    if not (request.mime_type or "").startswith("image/"):
        raise InputValidationError("Invalid file type. Please provide an image file.")
    if request.size_bytes > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise InputValidationError(f"File too large. Maximum size is {limit_mb}MB.")
    return request


def validate_translation_request(request: TranslationRequest | None) -> TranslationRequest:
    if request is None or not request.text or not request.target_language:
        raise InputValidationError("Text and target language are required")
    if not request.text.strip():
        raise InputValidationError("Text and target language are required")
    return request
