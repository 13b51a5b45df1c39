from __future__ import annotations

import logging
from collections.abc import Sequence

from ai_translator.domain.errors import ConfigurationError, ServiceUnavailableError
from ai_translator.domain.models import TranslationRequest, TranslationResult
from ai_translator.domain.validation import validate_translation_request
from ai_translator.ports.translation_port import TranslationProviderPort
from ai_translator.services.provider_chain import ProgressCallback, run_provider_chain

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "Translation service temporarily unavailable"


class TranslationService:
    """Runs the LLM -> machine translation -> phrase table chain."""

    def __init__(self, providers: Sequence[TranslationProviderPort]) -> None:
        self._providers = list(providers)

    @property
    def provider_names(self) -> list[str]:
        return [provider.name for provider in self._providers]

    def translate(
        self,
        request: TranslationRequest | None,
        progress_callback: ProgressCallback | None = None,
    ) -> TranslationResult:
        request = validate_translation_request(request)
        logger.info(
            "Translation request: %d chars, %s -> %s",
            len(request.text),
            request.source_language,
            request.target_language,
        )
        run = run_provider_chain(self._providers, request, "translation", progress_callback)
        if run.outcome.is_fatal:
            raise ConfigurationError(run.outcome.message)
        if not run.succeeded:
            attempted = ", ".join(attempt.provider for attempt in run.attempts)
            logger.error("All translation services failed (%s)", attempted)
            raise ServiceUnavailableError(UNAVAILABLE_MESSAGE)
        return run.outcome.value
