from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from ai_translator.domain.languages import language_name
from ai_translator.domain.models import SERVICE_LLM, TranslationRequest, TranslationResult
from ai_translator.domain.outcomes import ProviderOutcome
from ai_translator.ports.translation_port import TranslationProviderPort

logger = logging.getLogger(__name__)

API_KEY_MISSING = "API key not configured"


@dataclass(frozen=True)
class ChatEndpointPreset:
    base_url: str
    model: str
    temperature: float | None = None
    max_tokens: int | None = None


CHAT_PRESETS: dict[str, ChatEndpointPreset] = {
    "openrouter": ChatEndpointPreset(
        base_url="https://openrouter.ai/api/v1",
        model="deepseek/deepseek-r1-0528:free",
    ),
    "deepseek": ChatEndpointPreset(
        base_url="https://api.deepseek.com/v1",
        model="deepseek-chat",
        temperature=0.3,
        max_tokens=1000,
    ),
}


def build_system_prompt(target_language: str) -> str:
    return (
        "You are a professional translator. "
        f"Translate the given text to {language_name(target_language)}. "
        "Only return the translation, no explanations or additional text. "
        "If the source language is the same as target language, return the original text. "
        "Be precise and maintain the original meaning."
    )


class ChatCompletionTranslationAdapter(TranslationProviderPort):
    name = SERVICE_LLM

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        temperature: float | None = None,
        max_tokens: int | None = None,
        timeout: float = 30,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._timeout = timeout

    @classmethod
    def from_preset(
        cls,
        preset_name: str,
        api_key: str,
        base_url: str = "",
        model: str = "",
        timeout: float = 30,
    ) -> ChatCompletionTranslationAdapter:
        preset = CHAT_PRESETS.get(preset_name.lower())
        if preset is None:
            raise ValueError(
                f"Unknown translation provider {preset_name!r}; "
                f"expected one of {sorted(CHAT_PRESETS)}."
            )
        return cls(
            api_key=api_key,
            model=model or preset.model,
            base_url=base_url or preset.base_url,
            temperature=preset.temperature,
            max_tokens=preset.max_tokens,
            timeout=timeout,
        )

    def attempt(self, request: TranslationRequest) -> ProviderOutcome:
        if not self._api_key:
            logger.error("Translation API key not found in environment variables")
            return ProviderOutcome.fatal(API_KEY_MISSING)
        payload = self._post_chat(self._build_messages(request))
        if payload is None:
            return ProviderOutcome.recoverable("chat completion request failed")
        translation = self._extract_content(payload)
        if not translation:
            logger.warning("No translation received from chat completion API")
            return ProviderOutcome.recoverable("empty chat completion")
        return ProviderOutcome.success(
            TranslationResult(
                translation=translation,
                source_language=request.source_language,
                target_language=request.target_language,
                service=self.name,
            )
        )

    def _build_messages(self, request: TranslationRequest) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": build_system_prompt(request.target_language)},
            {"role": "user", "content": request.text},
        ]

    def _post_chat(self, messages: list[dict[str, str]]) -> dict | None:
        body: dict = {"model": self._model, "messages": messages}
        if self._temperature is not None:
            body["temperature"] = self._temperature
        if self._max_tokens is not None:
            body["max_tokens"] = self._max_tokens
        try:
            response = requests.post(
                f"{self._base_url}/chat/completions",
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
                json=body,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Chat completion request failed: %s", exc)
            return None
        logger.info("Chat completion API response status: %s", response.status_code)
        if not response.ok:
            logger.warning("Chat completion API error: %s", response.text[:500])
            return None
        try:
            payload = response.json()
        except ValueError:
            logger.warning("Chat completion API returned a non-JSON body")
            return None
        return payload if isinstance(payload, dict) else None

    @staticmethod
    def _extract_content(payload: dict) -> str:
        choices = payload.get("choices")
        if not isinstance(choices, list) or not choices:
            return ""
        first = choices[0]
        if not isinstance(first, dict):
            return ""
        message = first.get("message")
        if not isinstance(message, dict):
            return ""
        content = message.get("content")
        if not isinstance(content, str):
            return ""
        return content.strip()
