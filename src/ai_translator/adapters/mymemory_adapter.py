from __future__ import annotations

import logging

import requests

from ai_translator.domain.models import SERVICE_MT, TranslationRequest, TranslationResult
from ai_translator.domain.outcomes import ProviderOutcome
from ai_translator.ports.translation_port import TranslationProviderPort

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; AI-Translator/1.0)"


class MyMemoryAdapter(TranslationProviderPort):
    name = SERVICE_MT

    def __init__(self, url: str, timeout: float = 30) -> None:
        self._url = url
        self._timeout = timeout

    def attempt(self, request: TranslationRequest) -> ProviderOutcome:
        try:
            response = requests.get(
                self._url,
                params={
                    "q": request.text,
                    "langpair": f"auto|{request.target_language}",
                },
                headers={"User-Agent": USER_AGENT},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("MyMemory request failed: %s", exc)
            return ProviderOutcome.recoverable(f"request failed: {exc}")

        if response.status_code != 200:
            logger.warning("MyMemory API failed: %s", response.status_code)
            return ProviderOutcome.recoverable(f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError:
            logger.warning("MyMemory returned a non-JSON body")
            return ProviderOutcome.recoverable("malformed response")
        if not isinstance(payload, dict):
            return ProviderOutcome.recoverable("malformed response")

        translated = self._translated_text(payload)
        if payload.get("responseStatus") != 200 or not translated:
            logger.warning(
                "MyMemory translation failed: status=%s", payload.get("responseStatus")
            )
            return ProviderOutcome.recoverable("MyMemory translation failed")
        return ProviderOutcome.success(
            TranslationResult(
                translation=translated,
                source_language="auto",
                target_language=request.target_language,
                service=self.name,
            )
        )

    @staticmethod
    def _translated_text(payload: dict) -> str:
        data = payload.get("responseData")
        if isinstance(data, dict):
            text = data.get("translatedText")
            if isinstance(text, str) and text.strip():
                return text
        text = payload.get("translatedText")
        if isinstance(text, str) and text.strip():
            return text
        return ""
