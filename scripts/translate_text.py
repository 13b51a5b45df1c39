from __future__ import annotations

import argparse
import json
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)

from ai_translator.container import build_services
from ai_translator.domain.errors import TranslatorError
from ai_translator.domain.models import TranslationRequest
from ai_translator.logging_config import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the translation chain once.")
    parser.add_argument("text", help="Text to translate.")
    parser.add_argument("--target", required=True, help="Target language code, e.g. es.")
    parser.add_argument("--source", default="auto", help="Source language code.")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    configure_logging(args.log_level)
    service = build_services()["translation_service"]
    try:
        result = service.translate(
            TranslationRequest(
                text=args.text, target_language=args.target, source_language=args.source
            )
        )
    except TranslatorError as exc:
        raise SystemExit(f"Translation failed: {exc}")
    print(json.dumps(result.to_payload(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
