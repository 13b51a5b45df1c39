from __future__ import annotations

from dotenv import load_dotenv

load_dotenv(override=False)

import uvicorn

from ai_translator.api.app import create_app
from ai_translator.logging_config import configure_logging
from ai_translator.settings import API_HOST, API_PORT, LOG_LEVEL

configure_logging(LOG_LEVEL)
app = create_app()


def main() -> None:
    uvicorn.run(app, host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
