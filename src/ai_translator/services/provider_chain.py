from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from ai_translator.domain.outcomes import (
    FATAL,
    RECOVERABLE,
    ProviderAttempt,
    ProviderOutcome,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[dict], None]


@dataclass
class ChainRun:
    outcome: ProviderOutcome
    provider: str | None = None
    attempts: list[ProviderAttempt] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.outcome.is_success


def run_provider_chain(
    providers: Sequence[Any],
    request: object,
    chain_name: str,
    progress_callback: ProgressCallback | None = None,
) -> ChainRun:
    """Try providers in order until one succeeds or one fails fatally.

    Exceptions raised by a provider are logged and treated as a recoverable
    outcome so that the next provider still runs.
    """

    attempts: list[ProviderAttempt] = []
    for provider in providers:
        name = getattr(provider, "name", type(provider).__name__)
        _emit_progress(progress_callback, stage="provider_started", chain=chain_name, provider=name)
        started = perf_counter()
        try:
            outcome = provider.attempt(request)
        except Exception as exc:
            logger.exception("%s provider %s raised unexpectedly", chain_name, name)
            outcome = ProviderOutcome.recoverable(f"unexpected error: {exc}")
        if not isinstance(outcome, ProviderOutcome):
            logger.error("%s provider %s returned %r", chain_name, name, outcome)
            outcome = ProviderOutcome.recoverable("invalid provider outcome")
        duration_ms = int((perf_counter() - started) * 1000)
        attempts.append(ProviderAttempt(provider=name, status=outcome.status, message=outcome.message))
        _emit_progress(
            progress_callback,
            stage="provider_done",
            chain=chain_name,
            provider=name,
            status=outcome.status,
            duration_ms=duration_ms,
        )

        if outcome.is_success:
            logger.info("%s succeeded with %s in %d ms", chain_name, name, duration_ms)
            return ChainRun(outcome=outcome, provider=name, attempts=attempts)
        if outcome.status == FATAL:
            logger.error("%s stopped at %s: %s", chain_name, name, outcome.message)
            return ChainRun(outcome=outcome, provider=name, attempts=attempts)
        logger.info("%s provider %s gave no result: %s", chain_name, name, outcome.message)

    logger.warning("%s exhausted %d providers", chain_name, len(attempts))
    return ChainRun(
        outcome=ProviderOutcome(status=RECOVERABLE, message="all providers exhausted"),
        attempts=attempts,
    )


def _emit_progress(callback: ProgressCallback | None, **payload: object) -> None:
    if callback is None:
        return
    callback(dict(payload))
