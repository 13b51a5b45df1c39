from __future__ import annotations

import os

OCR_SPACE_API_KEY = os.getenv("OCR_SPACE_API_KEY", "helloworld")
OCR_SPACE_URL = os.getenv("OCR_SPACE_URL", "https://api.ocr.space/parse/image")
OCR_LANGUAGE = os.getenv("OCR_LANGUAGE", "eng")
OCR_ENGINE = os.getenv("OCR_ENGINE", "2")
GOOGLE_VISION_API_KEY = os.getenv("GOOGLE_VISION_API_KEY", "")
GOOGLE_VISION_URL = os.getenv(
    "GOOGLE_VISION_URL", "https://vision.googleapis.com/v1/images:annotate"
)

DEEPSEEK_API_KEY = os.getenv("DEEPSEEK_API_KEY", "")
TRANSLATION_PROVIDER = os.getenv("TRANSLATION_PROVIDER", "openrouter")
TRANSLATION_BASE_URL = os.getenv("TRANSLATION_BASE_URL", "")
TRANSLATION_MODEL = os.getenv("TRANSLATION_MODEL", "")
MYMEMORY_URL = os.getenv("MYMEMORY_URL", "https://api.mymemory.translated.net/get")

PROVIDER_TIMEOUT_SECONDS = float(os.getenv("PROVIDER_TIMEOUT_SECONDS", "30"))
MAX_IMAGE_BYTES = int(os.getenv("MAX_IMAGE_BYTES", str(10 * 1024 * 1024)))
TRANSLATION_HISTORY_LIMIT = int(os.getenv("TRANSLATION_HISTORY_LIMIT", "50"))
OCR_HISTORY_LIMIT = int(os.getenv("OCR_HISTORY_LIMIT", "20"))
TESSERACT_LANG = os.getenv("TESSERACT_LANG", "eng")

APP_ENV = os.getenv("APP_ENV", "production")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
