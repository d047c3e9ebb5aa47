"""Provider interface for text-quality checks."""

from __future__ import annotations

from typing import Protocol

from employee_validator.ai_engine.models import AIAnalysisResult, AIProvider


class TextQualityChecker(Protocol):
    """
    One text-quality backend.

    check() returns a successful AIAnalysisResult or raises AIProviderError
    (or a subclass); service.analyze_with_ai turns errors into results.
    """

    provider: AIProvider

    def check(self, text: str) -> AIAnalysisResult:
        ...
