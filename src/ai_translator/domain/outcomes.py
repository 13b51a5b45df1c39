from __future__ import annotations

from dataclasses import dataclass
from typing import Any

SUCCESS = "success"
RECOVERABLE = "recoverable"
FATAL = "fatal"


@dataclass(frozen=True)
class ProviderOutcome:
    """Result of a single provider attempt.

    ``recoverable`` means the chain should move on to the next provider;
    ``fatal`` stops the chain immediately.
    """

    status: str
    value: Any = None
    message: str = ""

    @classmethod
    def success(cls, value: Any) -> ProviderOutcome:
        return cls(status=SUCCESS, value=value)

    @classmethod
    def recoverable(cls, message: str) -> ProviderOutcome:
        return cls(status=RECOVERABLE, message=message)

    @classmethod
    def fatal(cls, message: str) -> ProviderOutcome:
        return cls(status=FATAL, message=message)

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS

    @property
    def is_fatal(self) -> bool:
        return self.status == FATAL


@dataclass(frozen=True)
class ProviderAttempt:
    provider: str
    status: str
    message: str = ""
