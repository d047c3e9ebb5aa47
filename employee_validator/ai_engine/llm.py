"""
Shared prompt and response handling for the LLM backends (OpenAI, Gemini).

Both are asked for the same JSON object; quality labels map to 0-10 scores.
"""

from __future__ import annotations

import json
import re
from typing import Any

from employee_validator.ai_engine.models import AIAnalysisResult, AIProvider, IssueSeverity, TextIssue
from employee_validator.ai_engine.professionalism import map_quality_to_score
from employee_validator.core.exceptions import AIResponseError

_CODE_FENCE = re.compile(r"```json\n?|\n?```")

_LLM_ISSUE_SEVERITY = {
    "professionalism": IssueSeverity.HIGH,
    "grammar": IssueSeverity.MEDIUM,
    "spelling": IssueSeverity.MEDIUM,
    "clarity": IssueSeverity.MEDIUM,
    "structure": IssueSeverity.LOW,
}

OPENAI_PROMPT = """Analyze this bio text for grammar, spelling, clarity, and professionalism. Return a JSON response with:
- issues: array of {{type, message, suggestion}}
- overallQuality: "excellent", "good", "fair", or "poor"
- suggestions: array of improvement tips
- tone: detected tone (professional, casual, etc.)

Bio text: "{text}"

Respond only with valid JSON."""

GEMINI_PROMPT = """You are a strict professional bio reviewer. Analyze this bio text for a job application or professional profile.

Evaluate these criteria:
1. PROFESSIONALISM: Is the language appropriate for a workplace? Filler words like "blah", "haha", "lol", slang, or nonsense text is UNPROFESSIONAL.
2. GRAMMAR & SPELLING: Check for errors, missing punctuation, capitalization issues.
3. CLARITY: Is it clear and meaningful? Vague or meaningless content should be flagged.
4. STRUCTURE: Does it have proper sentences? Is it well-organized?
5. CONTENT QUALITY: Does it actually describe the person professionally?

Be STRICT in your evaluation. A bio with filler words, nonsense, or unprofessional language should be rated "poor" or "fair", NOT "excellent" or "good".

Return a JSON response with:
- issues: array of {{type: "grammar"|"professionalism"|"clarity"|"structure", message: string, suggestion: string}}
- overallQuality: "excellent" (perfect professional bio), "good" (minor issues), "fair" (needs improvement), or "poor" (unprofessional/inappropriate)
- suggestions: array of improvement tips
- tone: detected tone (professional, casual, unprofessional, etc.)
- isProfessional: boolean (true only if suitable for a job application)

Bio text: "{text}"

Respond ONLY with valid JSON, no markdown code blocks."""


def strip_code_fences(content: str) -> str:
    return _CODE_FENCE.sub("", content).strip()


def parse_json_content(provider: AIProvider, content: str | None) -> dict[str, Any]:
    """Decode the model's JSON answer; anything but a JSON object is an AIResponseError."""
    if not content:
        raise AIResponseError(provider.value, f"Empty {provider.value} response")
    try:
        analysis = json.loads(strip_code_fences(content))
    except json.JSONDecodeError as e:
        raise AIResponseError(provider.value, f"Failed to parse {provider.value} response as JSON") from e
    if not isinstance(analysis, dict):
        raise AIResponseError(provider.value, f"Unexpected {provider.value} response structure")
    return analysis


def _normalize_issue(raw: Any) -> TextIssue | None:
    if isinstance(raw, str):
        return TextIssue(message=raw)
    if not isinstance(raw, dict):
        return None
    issue_type = str(raw.get("type") or "")
    suggestion = raw.get("suggestion")
    return TextIssue(
        message=str(raw.get("message") or ""),
        short_message=str(raw.get("shortMessage") or ""),
        suggestions=[str(suggestion)] if suggestion else [],
        category=issue_type,
        severity=_LLM_ISSUE_SEVERITY.get(issue_type.lower(), IssueSeverity.MEDIUM),
        type=issue_type,
    )


def analysis_to_result(provider: AIProvider, analysis: dict[str, Any]) -> AIAnalysisResult:
    """Build the normalized result from a decoded LLM analysis object."""
    raw_issues = analysis.get("issues") or []
    if not isinstance(raw_issues, list):
        raw_issues = []
    issues = [i for i in (_normalize_issue(r) for r in raw_issues) if i is not None]
    is_professional = analysis.get("isProfessional")
    return AIAnalysisResult(
        success=True,
        provider=provider,
        issues=issues,
        summary=analysis,
        score=map_quality_to_score(analysis.get("overallQuality")),
        is_professional=is_professional if isinstance(is_professional, bool) else None,
    )
