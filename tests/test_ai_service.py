"""
Tests for provider selection, LanguageTool fallback and bio enrichment.

build_checker is monkeypatched with fake checkers so no request leaves the
process.
"""

from __future__ import annotations

import pytest

from employee_validator.ai_engine import enrichment, service
from employee_validator.ai_engine.enrichment import ai_warning, combine_scores, enrich_bio
from employee_validator.ai_engine.languagetool import LanguageToolChecker
from employee_validator.ai_engine.gemini import GeminiChecker
from employee_validator.ai_engine.models import AIAnalysisResult, AIProvider, TextIssue
from employee_validator.ai_engine.openai_checker import OpenAIChecker
from employee_validator.config import Settings
from employee_validator.core.exceptions import AIConfigurationError, AIProviderError, AITimeoutError

TEXT = "Backend engineer at a bank in Phnom Penh."


class FakeChecker:
    def __init__(self, provider: AIProvider, result: AIAnalysisResult | None = None, error: Exception | None = None):
        self.provider = provider
        self._result = result
        self._error = error
        self.calls: list[str] = []

    def check(self, text: str) -> AIAnalysisResult:
        self.calls.append(text)
        if self._error is not None:
            raise self._error
        return self._result


def _ok(provider: AIProvider, score: int = 8) -> AIAnalysisResult:
    return AIAnalysisResult(success=True, provider=provider, score=score)


@pytest.fixture
def install_checkers(monkeypatch):
    """Map provider name -> FakeChecker; records the order providers were built in."""
    built: list[str] = []

    def install(**checkers: FakeChecker) -> list[str]:
        def fake_build(provider: str, settings: Settings) -> FakeChecker:
            built.append(provider)
            return checkers[provider]

        monkeypatch.setattr(service, "build_checker", fake_build)
        return built

    return install


# -----------------------------------------------------------------------------
# Provider selection
# -----------------------------------------------------------------------------

def test_build_checker_by_provider_name():
    settings = Settings(openai_api_key="sk", gemini_api_key="g", ai_timeout_sec=3.0)
    assert isinstance(service.build_checker("openai", settings), OpenAIChecker)
    assert isinstance(service.build_checker("gemini", settings), GeminiChecker)
    lt = service.build_checker("languagetool", settings)
    assert isinstance(lt, LanguageToolChecker)
    assert lt.timeout == 3.0
    assert isinstance(service.build_checker("unknown", settings), LanguageToolChecker)


def test_provider_info_reports_keys_without_values():
    info = service.get_ai_provider_info(Settings(ai_provider="gemini", gemini_api_key="secret"))
    assert info == {
        "currentProvider": "gemini",
        "available": {"languagetool": True, "openai": False, "gemini": True},
    }


# -----------------------------------------------------------------------------
# analyze_with_ai
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("text", [None, "", "too short", "   short   "])
def test_short_text_skips_providers(install_checkers, text):
    built = install_checkers()
    result = service.analyze_with_ai(text, Settings())
    assert result.success is False
    assert result.error == "Text too short for AI analysis"
    assert built == []


def test_primary_provider_success(install_checkers):
    built = install_checkers(openai=FakeChecker(AIProvider.OPENAI, _ok(AIProvider.OPENAI, 10)))
    result = service.analyze_with_ai(TEXT, Settings(ai_provider="openai", openai_api_key="sk"))
    assert result.success is True
    assert result.provider == AIProvider.OPENAI
    assert built == ["openai"]


@pytest.mark.parametrize(
    "error",
    [
        AIConfigurationError("OpenAI", "OpenAI API key not configured"),
        AITimeoutError("OpenAI", "OpenAI timed out after 8.0s"),
        RuntimeError("SDK bug"),
    ],
)
def test_failed_primary_falls_back_to_languagetool(install_checkers, error):
    built = install_checkers(
        openai=FakeChecker(AIProvider.OPENAI, error=error),
        languagetool=FakeChecker(AIProvider.LANGUAGETOOL, _ok(AIProvider.LANGUAGETOOL, 6)),
    )
    result = service.analyze_with_ai(TEXT, Settings(ai_provider="openai"))
    assert result.success is True
    assert result.provider == AIProvider.LANGUAGETOOL
    assert result.score == 6
    assert built == ["openai", "languagetool"]


def test_fallback_failure_returns_unsuccessful_result(install_checkers):
    built = install_checkers(
        gemini=FakeChecker(AIProvider.GEMINI, error=AIProviderError("Google Gemini", "Gemini HTTP 500")),
        languagetool=FakeChecker(AIProvider.LANGUAGETOOL, error=AIProviderError("LanguageTool", "LanguageTool down")),
    )
    result = service.analyze_with_ai(TEXT, Settings(ai_provider="gemini"))
    assert result.success is False
    assert result.error == "LanguageTool down"
    assert built == ["gemini", "languagetool"]


def test_languagetool_failure_is_not_retried(install_checkers):
    built = install_checkers(
        languagetool=FakeChecker(AIProvider.LANGUAGETOOL, error=AITimeoutError("LanguageTool", "timed out")),
    )
    result = service.analyze_with_ai(TEXT, Settings())
    assert result.success is False
    assert result.error == "timed out"
    assert built == ["languagetool"]


# -----------------------------------------------------------------------------
# Score combination and enrichment
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "basic,ai_score,expected",
    [(18, 8, 17), (20, 10, 20), (10, 0, 6), (8, 5, 9), (0, 10, 8)],
)
def test_combine_scores_success(basic, ai_score, expected):
    assert combine_scores(basic, _ok(AIProvider.LANGUAGETOOL, ai_score)) == expected


def test_combine_scores_failure_uses_fixed_points():
    assert combine_scores(18, AIAnalysisResult.failure("down")) == 15
    assert combine_scores(20, AIAnalysisResult.failure("down")) == 16


def test_ai_warning_format():
    assert ai_warning(TextIssue(message="Long", short_message="Spelling", suggestions=["engineer"])) == (
        'AI: Spelling (try: "engineer")'
    )
    assert ai_warning(TextIssue(message="Vague role")) == "AI: Vague role"


def test_enrich_bio_success(good_bio):
    issues = [TextIssue(message="Possible typo", short_message="Spelling", suggestions=["engineer"])]
    analyzer_result = AIAnalysisResult(
        success=True,
        provider=AIProvider.LANGUAGETOOL,
        issues=issues,
        score=8,
        summary={"overallQuality": "good"},
    )
    out = enrich_bio(good_bio, analyzer=lambda text: analyzer_result)
    assert out["score"] == 17
    assert out["valid"] is True
    assert out["strengthText"] == "Partial"
    assert out["warnings"] == ['AI: Spelling (try: "engineer")']
    assert out["aiAnalysis"]["provider"] == "LanguageTool"
    assert out["aiAnalysis"]["aiScore"] == 8
    assert out["aiAnalysis"]["issues"][0]["shortMessage"] == "Spelling"


def test_enrich_bio_caps_ai_warnings(good_bio):
    issues = [TextIssue(message=f"Issue {i}") for i in range(5)]
    result = AIAnalysisResult(success=True, provider=AIProvider.OPENAI, issues=issues, score=5)
    out = enrich_bio(good_bio, analyzer=lambda text: result)
    assert out["warnings"] == ["AI: Issue 0", "AI: Issue 1", "AI: Issue 2"]
    assert len(out["aiAnalysis"]["issues"]) == 5


def test_enrich_bio_provider_failure(good_bio):
    out = enrich_bio(good_bio, analyzer=lambda text: AIAnalysisResult.failure("LanguageTool down"))
    assert out["score"] == 15
    assert out["valid"] is True
    assert out["warnings"] == []
    assert out["aiAnalysis"] == {"error": "LanguageTool down"}


def test_enrich_bio_analyzer_exception_returns_basic(good_bio):
    def boom(text: str) -> AIAnalysisResult:
        raise RuntimeError("boom")

    out = enrich_bio(good_bio, analyzer=boom)
    assert out["score"] == 18
    assert out["aiAnalysis"] == {"error": "boom"}


def test_enrich_bio_invalid_basic_skips_analyzer():
    calls = []
    out = enrich_bio("too short", analyzer=lambda text: calls.append(text))
    assert calls == []
    assert out["score"] == 0
    assert out["errors"] == ["Bio is too short (9/20 characters minimum)"]
    assert out["aiAnalysis"] is None


def test_enrich_bio_default_analyzer_is_module_level(monkeypatch, good_bio):
    monkeypatch.setattr(enrichment, "analyze_with_ai", lambda text: _ok(AIProvider.GEMINI, 10))
    out = enrich_bio(good_bio)
    assert out["score"] == 19
    assert out["aiAnalysis"]["provider"] == "Google Gemini"
