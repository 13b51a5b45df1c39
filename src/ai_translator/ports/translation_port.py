from __future__ import annotations

from typing import Protocol, runtime_checkable

from ai_translator.domain.models import TranslationRequest
from ai_translator.domain.outcomes import ProviderOutcome


@runtime_checkable
class TranslationProviderPort(Protocol):
    name: str

    def attempt(self, request: TranslationRequest) -> ProviderOutcome:
        """Translate text; success carries a TranslationResult."""
