from __future__ import annotations

import logging

import requests

from ai_translator.domain.confidence import estimate_confidence
from ai_translator.domain.models import OCR_METHOD_OCR_SPACE, ExtractionRequest, ProviderText
from ai_translator.domain.outcomes import ProviderOutcome
from ai_translator.ports.ocr_port import OCRProviderPort

logger = logging.getLogger(__name__)


class OCRSpaceAdapter(OCRProviderPort):
    name = OCR_METHOD_OCR_SPACE

    def __init__(
        self,
        api_key: str,
        url: str,
        language: str = "eng",
        engine: str = "2",
        timeout: float = 30,
    ) -> None:
        self._api_key = api_key
        self._url = url
        self._language = language
        self._engine = engine
        self._timeout = timeout

    def attempt(self, request: ExtractionRequest) -> ProviderOutcome:
        try:
            response = requests.post(
                self._url,
                headers={"apikey": self._api_key},
                data={
                    "base64Image": request.data_uri(),
                    "language": self._language,
                    "isOverlayRequired": "false",
                    "detectOrientation": "true",
                    "scale": "true",
                    "OCREngine": self._engine,
                },
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("OCR.space request failed: %s", exc)
            return ProviderOutcome.recoverable(f"request failed: {exc}")

        if not response.ok:
            logger.warning(
                "OCR.space API request failed: %s %s", response.status_code, response.reason
            )
            return ProviderOutcome.recoverable(f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError:
            logger.warning("OCR.space returned a non-JSON body")
            return ProviderOutcome.recoverable("malformed response")
        if not isinstance(payload, dict):
            return ProviderOutcome.recoverable("malformed response")

        if payload.get("IsErroredOnProcessing"):
            logger.error("OCR.space processing error: %s", payload.get("ErrorMessage"))

        text = self._parsed_text(payload)
        if not text.strip():
            return ProviderOutcome.recoverable("no text detected")
        return ProviderOutcome.success(
            ProviderText(
                text=text,
                method=self.name,
                confidence=estimate_confidence(text),
            )
        )

    @staticmethod
    def _parsed_text(payload: dict) -> str:
        results = payload.get("ParsedResults")
        if not isinstance(results, list) or not results:
            return ""
        first = results[0]
        if not isinstance(first, dict):
            return ""
        text = first.get("ParsedText")
        return text if isinstance(text, str) else ""
