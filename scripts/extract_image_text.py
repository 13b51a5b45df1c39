from __future__ import annotations

import argparse
import json
import mimetypes
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)

from ai_translator.container import build_services
from ai_translator.domain.errors import TranslatorError
from ai_translator.domain.models import ExtractionRequest
from ai_translator.logging_config import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the OCR chain on an image file.")
    parser.add_argument("image", help="Path to an image file.")
    parser.add_argument(
        "--local-fallback",
        action="store_true",
        help="Run local Tesseract OCR when the hosted providers return nothing.",
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    configure_logging(args.log_level)
    path = Path(args.image)
    if not path.exists():
        raise SystemExit(f"Image not found: {path}")
    mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    request = ExtractionRequest.from_bytes(path.read_bytes(), mime_type, filename=path.name)

    services = build_services()
    try:
        result = services["ocr_service"].extract(request)
        if result.fallback and args.local_fallback:
            result = services["local_ocr_service"].extract(request)
    except TranslatorError as exc:
        raise SystemExit(f"OCR failed: {exc}")
    print(json.dumps(result.to_payload(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
