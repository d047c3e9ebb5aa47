"""
AI engine package — optional text-quality enrichment for bios.

One TextQualityChecker interface with three backends (LanguageTool, OpenAI,
Gemini) selected by AI_PROVIDER; LanguageTool doubles as the fallback.
"""

from employee_validator.ai_engine.enrichment import apply_ai_result, combine_scores, enrich_bio
from employee_validator.ai_engine.models import AIAnalysisResult, AIProvider, IssueSeverity, TextIssue
from employee_validator.ai_engine.service import analyze_with_ai, get_ai_provider_info

__all__ = [
    "apply_ai_result",
    "combine_scores",
    "enrich_bio",
    "AIAnalysisResult",
    "AIProvider",
    "IssueSeverity",
    "TextIssue",
    "analyze_with_ai",
    "get_ai_provider_info",
]
