from .ocr_service import OCRService
from .provider_chain import ChainRun, run_provider_chain
from .translation_service import TranslationService

__all__ = ["ChainRun", "OCRService", "TranslationService", "run_provider_chain"]
