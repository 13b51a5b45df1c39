from .confidence import estimate_confidence
from .history import BoundedHistory
from .models import (
    ExtractionRequest,
    ExtractionResult,
    HistoryEntry,
    TranslationRequest,
    TranslationResult,
)
from .outcomes import ProviderOutcome
from .text_normalizer import count_words, normalize_text

__all__ = [
    "BoundedHistory",
    "ExtractionRequest",
    "ExtractionResult",
    "HistoryEntry",
    "ProviderOutcome",
    "TranslationRequest",
    "TranslationResult",
    "count_words",
    "estimate_confidence",
    "normalize_text",
]
