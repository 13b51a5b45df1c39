from __future__ import annotations

from typing import Protocol, runtime_checkable

from ai_translator.domain.models import ExtractionRequest
from ai_translator.domain.outcomes import ProviderOutcome


@runtime_checkable
class OCRProviderPort(Protocol):
    name: str

    def attempt(self, request: ExtractionRequest) -> ProviderOutcome:
        """Extract text; success carries a ProviderText."""
