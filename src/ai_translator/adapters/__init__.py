from .google_vision_adapter import GoogleVisionAdapter
from .llm_chat_adapter import ChatCompletionTranslationAdapter
from .mymemory_adapter import MyMemoryAdapter
from .ocr_space_adapter import OCRSpaceAdapter
from .ocr_tesseract_adapter import TesseractOCRAdapter
from .static_phrase_adapter import StaticPhraseAdapter

__all__ = [
    "ChatCompletionTranslationAdapter",
    "GoogleVisionAdapter",
    "MyMemoryAdapter",
    "OCRSpaceAdapter",
    "StaticPhraseAdapter",
    "TesseractOCRAdapter",
]
