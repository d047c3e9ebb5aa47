"""
Application-level exceptions.

Scorers never raise: malformed input becomes a hard error inside the
ValidationResult. These exceptions cover the external text-quality providers;
ai_engine.service converts every one of them into an unsuccessful
AIAnalysisResult so they never reach a route handler.
"""

from __future__ import annotations


class ValidatorError(Exception):
    """Base class for Employee Validator errors."""


class AIProviderError(ValidatorError):
    """A text-quality provider call failed (network, HTTP status, payload)."""

    def __init__(self, provider: str, message: str):
        super().__init__(message)
        self.provider = provider
        self.message = message

    def __str__(self) -> str:
        return self.message


class AIConfigurationError(AIProviderError):
    """Provider selected but not usable, e.g. API key missing."""


class AIResponseError(AIProviderError):
    """Provider answered with an error object or a payload we cannot parse."""


class AITimeoutError(AIProviderError):
    """Provider did not answer within AI_TIMEOUT_SEC."""
