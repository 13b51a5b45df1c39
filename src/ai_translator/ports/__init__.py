from .ocr_port import OCRProviderPort
from .translation_port import TranslationProviderPort

__all__ = ["OCRProviderPort", "TranslationProviderPort"]
