"""
LanguageTool backend — free grammar checker, no API key.

Default provider and the unconditional fallback for the paid backends.
POSTs form data to /v2/check and scores the matches with the
professionalism heuristics.
"""

from __future__ import annotations

from typing import Any

import httpx

from employee_validator.ai_engine.models import AIAnalysisResult, AIProvider, IssueSeverity, TextIssue
from employee_validator.ai_engine.professionalism import calculate_quality_score, generate_summary
from employee_validator.config.env import (
    DEFAULT_AI_TIMEOUT_SEC,
    DEFAULT_LANGUAGETOOL_LANGUAGE,
    DEFAULT_LANGUAGETOOL_URL,
)
from employee_validator.core.exceptions import AIProviderError, AIResponseError, AITimeoutError

MAX_SUGGESTIONS = 3

# LanguageTool rule issueType -> severity
_ISSUE_TYPE_SEVERITY = {
    "misspelling": IssueSeverity.HIGH,
    "grammar": IssueSeverity.HIGH,
    "typographical": IssueSeverity.MEDIUM,
    "duplication": IssueSeverity.MEDIUM,
    "inconsistency": IssueSeverity.MEDIUM,
}


def parse_match(match: dict[str, Any]) -> TextIssue:
    """Normalize one LanguageTool match into a TextIssue."""
    rule = match.get("rule") or {}
    category = (rule.get("category") or {}).get("name") or ""
    issue_type = rule.get("issueType") or ""
    ctx = match.get("context") or {}
    ctx_text = ctx.get("text") or ""
    offset = int(ctx.get("offset") or 0)
    length = int(ctx.get("length") or 0)
    replacements = match.get("replacements") or []
    return TextIssue(
        message=match.get("message") or "",
        short_message=match.get("shortMessage") or rule.get("description") or "",
        suggestions=[r.get("value", "") for r in replacements[:MAX_SUGGESTIONS] if r.get("value")],
        category=category,
        severity=_ISSUE_TYPE_SEVERITY.get(issue_type, IssueSeverity.LOW),
        context=ctx_text[offset:offset + length],
        type=issue_type,
    )


class LanguageToolChecker:
    """TextQualityChecker backed by the public LanguageTool HTTP API."""

    provider = AIProvider.LANGUAGETOOL

    def __init__(
        self,
        url: str = DEFAULT_LANGUAGETOOL_URL,
        *,
        language: str = DEFAULT_LANGUAGETOOL_LANGUAGE,
        timeout: float = DEFAULT_AI_TIMEOUT_SEC,
        client: httpx.Client | None = None,
    ):
        self.url = url
        self.language = language
        self.timeout = timeout
        self._client = client

    def _post(self, data: dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return self._client.post(self.url, data=data, timeout=self.timeout)
        with httpx.Client(timeout=self.timeout) as client:
            return client.post(self.url, data=data)

    def check(self, text: str) -> AIAnalysisResult:
        name = self.provider.value
        try:
            resp = self._post({"text": text, "language": self.language})
            resp.raise_for_status()
            payload = resp.json()
        except httpx.TimeoutException as e:
            raise AITimeoutError(name, f"LanguageTool timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise AIProviderError(name, f"LanguageTool request failed: {e}") from e
        except ValueError as e:
            raise AIResponseError(name, "Failed to parse LanguageTool response") from e

        matches = payload.get("matches") if isinstance(payload, dict) else None
        if not isinstance(matches, list):
            raise AIResponseError(name, "Failed to parse LanguageTool response")

        try:
            issues = [parse_match(m) for m in matches]
        except (AttributeError, TypeError, ValueError) as e:
            raise AIResponseError(name, "Failed to parse LanguageTool response") from e

        return AIAnalysisResult(
            success=True,
            provider=self.provider,
            issues=issues,
            summary=generate_summary(issues, text),
            score=calculate_quality_score(issues, text),
        )
