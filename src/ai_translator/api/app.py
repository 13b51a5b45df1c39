from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.datastructures import UploadFile

from ai_translator import __version__
from ai_translator.api.schemas import (
    ErrorResponse,
    HealthResponse,
    LanguageOut,
    OCRFallbackResponse,
    OCRResponse,
    TranslateRequestBody,
    TranslateResponse,
)
from ai_translator.domain.errors import (
    ConfigurationError,
    InputValidationError,
    ServiceUnavailableError,
)
from ai_translator.domain.languages import list_languages
from ai_translator.domain.models import ExtractionRequest, TranslationRequest
from ai_translator.services.translation_service import UNAVAILABLE_MESSAGE

logger = logging.getLogger(__name__)

OCR_FAILURE_MESSAGE = "Failed to process image for text extraction"
SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
}


def create_app(services: dict[str, Any] | None = None, app_env: str | None = None) -> FastAPI:
    """Build the HTTP application around already-wired services."""

    if services is None:
        from ai_translator.container import build_services

        services = build_services()
    if app_env is None:
        from ai_translator.settings import APP_ENV

        app_env = APP_ENV
    ocr_service = services["ocr_service"]
    translation_service = services["translation_service"]
    show_details = app_env != "production"

    app = FastAPI(title="AI Translator", version=__version__)

    def _error(status_code: int, message: str, exc: Exception | None = None) -> JSONResponse:
        body = ErrorResponse(
            error=message,
            details=str(exc) if exc is not None and show_details else None,
        )
        return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    @app.post("/api/ocr")
    async def extract_text(request: Request):
        try:
            extraction_request = await _read_extraction_request(request)
        except ValueError as exc:
            logger.info("Rejected OCR upload: %s", exc)
            return _error(400, "No image file provided")
        try:
            result = await run_in_threadpool(ocr_service.extract, extraction_request)
        except InputValidationError as exc:
            logger.info("Rejected OCR upload: %s", exc)
            return _error(400, str(exc))
        except Exception as exc:
            logger.exception("OCR processing error")
            return _error(500, OCR_FAILURE_MESSAGE, exc)
        if result.fallback:
            body = OCRFallbackResponse(
                text=result.text,
                message=result.message or "",
                suggestions=list(result.suggestions),
            )
        else:
            body = OCRResponse(**result.to_payload())
        return JSONResponse(content=body.model_dump())

    @app.post("/api/translate")
    async def translate(request: Request):
        try:
            payload = await request.json()
        except ValueError:
            return _error(400, "Request body must be valid JSON")
        try:
            body = TranslateRequestBody.model_validate(payload)
        except ValidationError:
            return _error(400, "Text and target language are required")
        translation_request = TranslationRequest(
            text=body.text or "",
            target_language=body.targetLanguage or "",
            source_language=body.sourceLanguage or "auto",
        )
        try:
            result = await run_in_threadpool(translation_service.translate, translation_request)
        except InputValidationError as exc:
            return _error(400, str(exc))
        except ConfigurationError as exc:
            return _error(500, str(exc))
        except ServiceUnavailableError as exc:
            return _error(500, UNAVAILABLE_MESSAGE, exc)
        except Exception as exc:
            logger.exception("Translation error")
            return _error(500, UNAVAILABLE_MESSAGE, exc)
        return JSONResponse(content=TranslateResponse(**result.to_payload()).model_dump())

    @app.get("/api/languages")
    async def languages() -> list[LanguageOut]:
        return [LanguageOut(**language) for language in list_languages()]

    @app.get("/api/health")
    async def health() -> HealthResponse:
        return HealthResponse(
            status="ok",
            ocrProviders=ocr_service.provider_names,
            translationProviders=translation_service.provider_names,
        )

    return app


async def _read_extraction_request(request: Request) -> ExtractionRequest | None:
    try:
        form = await request.form()
    except Exception as exc:
        raise ValueError(f"unreadable multipart body: {exc}") from exc
    image = form.get("image")
    if not isinstance(image, UploadFile):
        return None
    data = await image.read()
    return ExtractionRequest(
        image_bytes=data,
        mime_type=image.content_type or "",
        size_bytes=len(data),
        filename=image.filename,
    )
