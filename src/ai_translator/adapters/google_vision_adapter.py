from __future__ import annotations

import logging

import requests

from ai_translator.domain.models import (
    OCR_METHOD_GOOGLE_VISION,
    ExtractionRequest,
    ProviderText,
)
from ai_translator.domain.outcomes import ProviderOutcome
from ai_translator.ports.ocr_port import OCRProviderPort

logger = logging.getLogger(__name__)

VISION_CONFIDENCE = 90


class GoogleVisionAdapter(OCRProviderPort):
    name = OCR_METHOD_GOOGLE_VISION

    def __init__(self, api_key: str, url: str, timeout: float = 30) -> None:
        self._api_key = api_key
        self._url = url
        self._timeout = timeout

    def attempt(self, request: ExtractionRequest) -> ProviderOutcome:
        if not self._api_key:
            return ProviderOutcome.recoverable("vision API key not configured")
        try:
            response = requests.post(
                self._url,
                params={"key": self._api_key},
                headers={"Content-Type": "application/json"},
                json={
                    "requests": [
                        {
                            "image": {"content": request.base64_content()},
                            "features": [{"type": "TEXT_DETECTION", "maxResults": 1}],
                        }
                    ]
                },
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            # The exception text can embed the URL, which carries the key.
            logger.warning("Google Vision request failed: %s", type(exc).__name__)
            return ProviderOutcome.recoverable("request failed")

        if not response.ok:
            logger.warning("Google Vision API request failed: %s", response.status_code)
            return ProviderOutcome.recoverable(f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError:
            logger.warning("Google Vision returned a non-JSON body")
            return ProviderOutcome.recoverable("malformed response")

        description = self._top_annotation(payload)
        if not description.strip():
            return ProviderOutcome.recoverable("no text detected")
        return ProviderOutcome.success(
            ProviderText(text=description, method=self.name, confidence=VISION_CONFIDENCE)
        )

    @staticmethod
    def _top_annotation(payload: object) -> str:
        if not isinstance(payload, dict):
            return ""
        responses = payload.get("responses")
        if not isinstance(responses, list) or not responses:
            return ""
        first = responses[0]
        if not isinstance(first, dict):
            return ""
        annotations = first.get("textAnnotations")
        if not isinstance(annotations, list) or not annotations:
            return ""
        top = annotations[0]
        if not isinstance(top, dict):
            return ""
        description = top.get("description")
        return description if isinstance(description, str) else ""
