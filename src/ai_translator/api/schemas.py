from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TranslateRequestBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str | None = None
    targetLanguage: str | None = None
    sourceLanguage: str | None = None


class TranslateResponse(BaseModel):
    translation: str
    sourceLanguage: str
    targetLanguage: str
    service: str


class OCRResponse(BaseModel):
    text: str
    confidence: int
    method: str
    length: int
    wordCount: int


class OCRFallbackResponse(BaseModel):
    text: str = ""
    fallback: bool = True
    message: str
    suggestions: list[str]


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class LanguageOut(BaseModel):
    code: str
    name: str


class HealthResponse(BaseModel):
    status: str
    ocrProviders: list[str]
    translationProviders: list[str]
