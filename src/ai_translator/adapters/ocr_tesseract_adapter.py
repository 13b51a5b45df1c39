from __future__ import annotations

import io
import logging
import re

from ai_translator.domain.confidence import estimate_confidence
from ai_translator.domain.models import OCR_METHOD_TESSERACT, ExtractionRequest, ProviderText
from ai_translator.domain.outcomes import ProviderOutcome
from ai_translator.ports.ocr_port import OCRProviderPort

logger = logging.getLogger(__name__)

TESSERACT_CONFIG = "--oem 1 --psm 6"


class TesseractOCRAdapter(OCRProviderPort):
    """Local OCR used when every hosted provider came back empty."""

    name = OCR_METHOD_TESSERACT

    def __init__(self, language: str = "eng") -> None:
        self._language = language

    def attempt(self, request: ExtractionRequest) -> ProviderOutcome:
        try:
            import pytesseract
            from PIL import Image
        except ImportError:
            logger.error(
                "pytesseract and Pillow are required for local OCR. "
                "Install with: pip install pytesseract pillow"
            )
            return ProviderOutcome.recoverable("local OCR unavailable")

        try:
            image = Image.open(io.BytesIO(request.image_bytes))
            image.load()
        except Exception as exc:
            logger.warning("Failed to load image bytes for local OCR: %s", exc)
            return ProviderOutcome.recoverable("unreadable image")

        try:
            text = self._best_text(image, pytesseract)
        except pytesseract.TesseractNotFoundError:
            logger.error(
                "Tesseract OCR engine not found. Install tesseract-ocr and ensure it is on PATH."
            )
            return ProviderOutcome.recoverable("tesseract not installed")
        except Exception as exc:
            logger.warning("Local OCR failed: %s", exc)
            return ProviderOutcome.recoverable(f"local OCR failed: {exc}")

        if not text.strip():
            return ProviderOutcome.recoverable("no text detected")
        return ProviderOutcome.success(
            ProviderText(text=text, method=self.name, confidence=estimate_confidence(text))
        )

    def _best_text(self, image: object, pytesseract: object) -> str:
        raw_image = self._auto_rotate(image, pytesseract)
        raw_text = pytesseract.image_to_string(
            raw_image, lang=self._language, config=TESSERACT_CONFIG
        )
        raw_conf = self._mean_confidence(pytesseract, raw_image)

        processed_image = self._auto_rotate(self._preprocess_image(image), pytesseract)
        processed_text = pytesseract.image_to_string(
            processed_image, lang=self._language, config=TESSERACT_CONFIG
        )
        processed_conf = self._mean_confidence(pytesseract, processed_image)

        if not processed_text.strip():
            return raw_text
        if not raw_text.strip():
            return processed_text
        if (processed_conf or 0.0) >= (raw_conf or 0.0):
            return processed_text
        return raw_text

    def _mean_confidence(self, pytesseract: object, image: object) -> float | None:
        data = pytesseract.image_to_data(
            image,
            lang=self._language,
            config=TESSERACT_CONFIG,
            output_type=pytesseract.Output.DICT,
        )
        conf_values: list[float] = []
        for value in data.get("conf", []):
            if value in (-1, "-1", None, ""):
                continue
            try:
                conf_values.append(float(value))
            except (TypeError, ValueError):
                continue
        if not conf_values:
            return None
        return sum(conf_values) / len(conf_values)

    def _auto_rotate(self, image: object, pytesseract: object) -> object:
        try:
            # OSD runs on osd.traineddata, not on the recognition language.
            osd = pytesseract.image_to_osd(image)
        except Exception:
            return image
        match = re.search(r"Rotate:\s*(\d+)", osd)
        if not match:
            return image
        rotate = int(match.group(1))
        if rotate == 0:
            return image
        return image.rotate(-rotate, expand=True)

    def _preprocess_image(self, image: object) -> object:
        from PIL import Image, ImageFilter, ImageOps

        img = image.convert("L")
        img = ImageOps.autocontrast(img)
        img = img.filter(ImageFilter.MedianFilter(size=3))
        img = img.filter(ImageFilter.SHARPEN)
        if max(img.size) < 1200:
            img = img.resize(
                (img.size[0] * 2, img.size[1] * 2),
                resample=Image.BICUBIC,
            )
        return img
