from __future__ import annotations

import base64
from dataclasses import dataclass, field

OCR_METHOD_OCR_SPACE = "ocr.space"
OCR_METHOD_GOOGLE_VISION = "google-vision"
OCR_METHOD_TESSERACT = "tesseract"
OCR_METHOD_NONE = "none"

SERVICE_LLM = "deepseek"
SERVICE_MT = "mymemory"
SERVICE_STATIC = "simple"


@dataclass(frozen=True)
class ExtractionRequest:
    image_bytes: bytes
    mime_type: str
    size_bytes: int
    filename: str | None = None

    @classmethod
    def from_bytes(
        cls, image_bytes: bytes, mime_type: str, filename: str | None = None
    ) -> ExtractionRequest:
        return cls(
            image_bytes=image_bytes,
            mime_type=mime_type or "",
            size_bytes=len(image_bytes),
            filename=filename,
        )

    def base64_content(self) -> str:
        return base64.b64encode(self.image_bytes).decode("ascii")

    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64_content()}"


@dataclass(frozen=True)
class ProviderText:
    """Raw text returned by an OCR provider before normalization."""

    text: str
    method: str
    confidence: int | None = None


@dataclass(frozen=True)
class ExtractionResult:
    text: str
    method: str
    confidence: int
    length: int
    word_count: int
    fallback: bool = False
    message: str | None = None
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    def to_payload(self) -> dict:
        if self.fallback:
            return {
                "text": self.text,
                "fallback": True,
                "message": self.message,
                "suggestions": list(self.suggestions),
            }
        return {
            "text": self.text,
            "confidence": self.confidence,
            "method": self.method,
            "length": self.length,
            "wordCount": self.word_count,
        }


@dataclass(frozen=True)
class TranslationRequest:
    text: str
    target_language: str
    source_language: str = "auto"


@dataclass(frozen=True)
class TranslationResult:
    translation: str
    source_language: str
    target_language: str
    service: str

    def to_payload(self) -> dict:
        return {
            "translation": self.translation,
            "sourceLanguage": self.source_language,
            "targetLanguage": self.target_language,
            "service": self.service,
        }


@dataclass
class HistoryEntry:
    id: str
    original: str
    text: str
    timestamp: str
    metadata: dict = field(default_factory=dict)
