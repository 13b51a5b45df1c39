from __future__ import annotations


class TranslatorError(RuntimeError):
    """Base class for errors surfaced to callers of the services."""


class InputValidationError(TranslatorError):
    """The caller sent a request that violates an input constraint."""


class ConfigurationError(TranslatorError):
    """A required credential or setting is missing."""


class ServiceUnavailableError(TranslatorError):
    """Every provider in a chain, including the last-resort ones, failed."""
