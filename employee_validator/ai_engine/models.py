"""
Result types for the AI text-quality providers.

Every provider normalizes its answer into AIAnalysisResult so the bio
enrichment path never branches on which backend produced it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AIProvider(str, Enum):
    LANGUAGETOOL = "LanguageTool"
    OPENAI = "OpenAI"
    GEMINI = "Google Gemini"


class IssueSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class TextIssue:
    """Single grammar, style or professionalism finding."""

    message: str
    short_message: str = ""
    suggestions: list[str] = field(default_factory=list)
    category: str = ""
    severity: IssueSeverity = IssueSeverity.MEDIUM
    context: str = ""
    """Flagged span of the input, when the provider reports one."""
    type: str = ""
    """Provider issue type (LanguageTool issueType, LLM issue type)."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "shortMessage": self.short_message,
            "suggestions": list(self.suggestions),
            "category": self.category,
            "severity": self.severity.value,
            "context": self.context,
            "type": self.type,
        }


@dataclass
class AIAnalysisResult:
    """
    Outcome of one text-quality check.

    success=False carries an error message and score 0; it is a value, not an
    exception, so callers always get a result back.
    """

    success: bool
    provider: AIProvider | None = None
    issues: list[TextIssue] = field(default_factory=list)
    score: int = 0
    """Quality score 0-10."""
    summary: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    is_professional: bool | None = None

    @classmethod
    def failure(cls, error: str, provider: AIProvider | None = None) -> AIAnalysisResult:
        return cls(success=False, provider=provider, score=0, error=error)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "success": self.success,
            "provider": self.provider.value if self.provider else None,
            "issues": [i.to_dict() for i in self.issues],
            "summary": self.summary,
            "score": self.score,
        }
        if self.error is not None:
            out["error"] = self.error
        if self.is_professional is not None:
            out["isProfessional"] = self.is_professional
        return out
