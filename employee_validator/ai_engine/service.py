"""
AI text-quality service: provider selection and LanguageTool fallback.

analyze_with_ai never raises. A failing primary provider gets exactly one
substitution (LanguageTool); if that fails too, the caller receives an
unsuccessful AIAnalysisResult.
"""

from __future__ import annotations

from typing import Any

from employee_validator.ai_engine.base import TextQualityChecker
from employee_validator.ai_engine.gemini import GeminiChecker
from employee_validator.ai_engine.languagetool import LanguageToolChecker
from employee_validator.ai_engine.models import AIAnalysisResult
from employee_validator.ai_engine.openai_checker import OpenAIChecker
from employee_validator.config import Settings, get_settings
from employee_validator.core.exceptions import AIProviderError, AITimeoutError
from employee_validator.validator_logging import get_logger

logger = get_logger(__name__)

MIN_TEXT_LENGTH = 10


def build_checker(provider: str, settings: Settings) -> TextQualityChecker:
    """Checker for a configured provider name; unknown names get LanguageTool."""
    if provider == "openai":
        return OpenAIChecker(
            settings.openai_api_key,
            model=settings.openai_model,
            timeout=settings.ai_timeout_sec,
        )
    if provider == "gemini":
        return GeminiChecker(
            settings.gemini_api_key,
            model=settings.gemini_model,
            timeout=settings.ai_timeout_sec,
        )
    return LanguageToolChecker(
        settings.languagetool_url,
        language=settings.languagetool_language,
        timeout=settings.ai_timeout_sec,
    )


def _run(provider: str, text: str, settings: Settings) -> AIAnalysisResult:
    """Run one provider; raises AIProviderError on any failure."""
    checker = build_checker(provider, settings)
    try:
        return checker.check(text)
    except AIProviderError:
        raise
    except Exception as e:
        # Unexpected provider bugs are still provider failures
        raise AIProviderError(checker.provider.value, str(e) or type(e).__name__) from e


def analyze_with_ai(text: str | None, settings: Settings | None = None) -> AIAnalysisResult:
    """
    Check bio text with the configured provider.

    Text shorter than 10 characters is rejected without a network call.
    """
    if not text or len(text.strip()) < MIN_TEXT_LENGTH:
        return AIAnalysisResult.failure("Text too short for AI analysis")

    settings = settings or get_settings()
    provider = settings.ai_provider
    try:
        result = _run(provider, text, settings)
        logger.info(
            "ai_analysis_completed",
            provider=result.provider.value if result.provider else provider,
            score=result.score,
        )
        return result
    except AIProviderError as e:
        event = "ai_provider_timeout" if isinstance(e, AITimeoutError) else "ai_provider_failed"
        logger.warning(event, provider=provider, error=str(e))
        if provider == "languagetool":
            return AIAnalysisResult.failure(str(e))

    logger.info("ai_fallback_languagetool", primary_provider=provider)
    try:
        return _run("languagetool", text, settings)
    except AIProviderError as fallback_error:
        logger.warning("ai_fallback_failed", provider="languagetool", error=str(fallback_error))
        return AIAnalysisResult.failure(str(fallback_error))


def get_ai_provider_info(settings: Settings | None = None) -> dict[str, Any]:
    """Current provider and which providers have credentials."""
    settings = settings or get_settings()
    return {
        "currentProvider": settings.ai_provider,
        "available": {
            "languagetool": True,
            "openai": bool(settings.openai_api_key),
            "gemini": bool(settings.gemini_api_key),
        },
    }
