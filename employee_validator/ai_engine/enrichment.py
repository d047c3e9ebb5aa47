"""
AI enrichment of the basic bio score.

The rule-based score is rescaled to 12 points and the provider's 0-10
quality score to 8 points; their sum (capped at 20) replaces the basic score.
A failed provider call contributes a fixed 4 points.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from employee_validator.ai_engine.models import AIAnalysisResult, TextIssue
from employee_validator.ai_engine.service import analyze_with_ai
from employee_validator.scoring.aggregator import field_response
from employee_validator.scoring.bio import validate_bio
from employee_validator.scoring.models import ValidationResult
from employee_validator.scoring.reference_data import FIELD_MAX_SCORE, FIELD_VALID_THRESHOLD
from employee_validator.scoring.strength import field_strength_color, field_strength_text
from employee_validator.validator_logging import get_logger

logger = get_logger(__name__)

BASIC_POINTS = 12
AI_POINTS = 8
AI_MAX_SCORE = 10
AI_FALLBACK_POINTS = 4
MAX_AI_WARNINGS = 3

Analyzer = Callable[[str], AIAnalysisResult]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def combine_scores(basic_score: int, ai_result: AIAnalysisResult) -> int:
    """round(basic*12/20) + round(ai*8/10) (or 4 on failure), capped at 20."""
    basic_scaled = _round_half_up(basic_score * BASIC_POINTS / FIELD_MAX_SCORE)
    if ai_result.success:
        ai_scaled = _round_half_up(ai_result.score * AI_POINTS / AI_MAX_SCORE)
    else:
        ai_scaled = AI_FALLBACK_POINTS
    return max(0, min(basic_scaled + ai_scaled, FIELD_MAX_SCORE))


def ai_warning(issue: TextIssue) -> str:
    text = f"AI: {issue.short_message or issue.message}"
    if issue.suggestions:
        text += f' (try: "{issue.suggestions[0]}")'
    return text


def _ai_analysis(ai_result: AIAnalysisResult) -> dict[str, Any]:
    if not ai_result.success:
        return {"error": ai_result.error or "AI analysis failed"}
    return {
        "provider": ai_result.provider.value if ai_result.provider else None,
        "issues": [i.to_dict() for i in ai_result.issues],
        "summary": ai_result.summary,
        "aiScore": ai_result.score,
    }


def apply_ai_result(basic: ValidationResult, ai_result: AIAnalysisResult) -> dict[str, Any]:
    """Bio response payload combining the basic result with one AI result."""
    combined = combine_scores(basic.score, ai_result)
    warnings = list(basic.warnings)
    if ai_result.success:
        warnings.extend(ai_warning(i) for i in ai_result.issues[:MAX_AI_WARNINGS])
    enriched = ValidationResult(
        valid=not basic.errors and combined >= FIELD_VALID_THRESHOLD,
        score=combined,
        max_score=basic.max_score,
        errors=list(basic.errors),
        warnings=warnings,
        details=dict(basic.details),
    )
    out = field_response("bio", enriched)
    out["aiAnalysis"] = _ai_analysis(ai_result)
    return out


def enrich_bio(bio: str | None, analyzer: Analyzer | None = None) -> dict[str, Any]:
    """
    Score a bio and, when the basic result is valid, enrich it with AI analysis.

    Never raises: an unexpected failure in the AI path returns the basic
    result with aiAnalysis={"error": ...}.
    """
    analyzer = analyzer or analyze_with_ai
    basic = validate_bio(bio)
    if not basic.valid or basic.score == 0:
        out = field_response("bio", basic)
        out["aiAnalysis"] = None
        return out

    try:
        ai_result = analyzer(bio)
        out = apply_ai_result(basic, ai_result)
    except Exception as e:
        logger.exception("bio_ai_enrichment_failed", error=str(e))
        out = field_response("bio", basic)
        out["aiAnalysis"] = {"error": str(e) or type(e).__name__}
        return out

    logger.info(
        "bio_ai_enriched",
        success=ai_result.success,
        basic_score=basic.score,
        combined_score=out["score"],
    )
    return out
