from __future__ import annotations

from ai_translator.domain.models import SERVICE_STATIC, TranslationRequest, TranslationResult
from ai_translator.domain.outcomes import ProviderOutcome
from ai_translator.domain.phrase_table import STATIC_PHRASES, lookup_phrase
from ai_translator.ports.translation_port import TranslationProviderPort


class StaticPhraseAdapter(TranslationProviderPort):
    name = SERVICE_STATIC

    def __init__(self, phrases: dict[str, dict[str, str]] | None = None) -> None:
        self._phrases = phrases if phrases is not None else STATIC_PHRASES

    def attempt(self, request: TranslationRequest) -> ProviderOutcome:
        translation = lookup_phrase(request.text, request.target_language, self._phrases)
        if not translation:
            return ProviderOutcome.recoverable("no static phrase entry")
        return ProviderOutcome.success(
            TranslationResult(
                translation=translation,
                source_language="auto",
                target_language=request.target_language,
                service=self.name,
            )
        )
