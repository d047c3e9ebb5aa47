"""
Professionalism heuristics layered on top of LanguageTool grammar matches.

LanguageTool only reports grammar and spelling; these pattern checks catch
filler words, slang, placeholder text and repetition, and drive the 0-10
quality score for the free backend.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Any

from employee_validator.ai_engine.models import IssueSeverity, TextIssue

# High severity: each hit caps the score harshly
_FILLER_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\b(blah|bleh|meh)\b", re.IGNORECASE), "Contains filler words"),
    (re.compile(r"\b(haha|hehe|lol|lmao|rofl)\b", re.IGNORECASE), "Contains informal laughter"),
    (re.compile(r"\b(um+|uh+|er+|hmm+)\b", re.IGNORECASE), "Contains verbal fillers"),
    (re.compile(r"\b(stuff|things|whatever)\b", re.IGNORECASE), "Contains vague words"),
    (re.compile(r"(.)\1{3,}", re.IGNORECASE), "Contains repeated characters"),
    (re.compile(r"\b(test|testing|asdf|qwerty)\b", re.IGNORECASE), "Contains test/placeholder text"),
)

_UNPROFESSIONAL_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (
        re.compile(r"\b(awesome|cool|dude|bro|gonna|wanna|gotta|kinda|sorta)\b", re.IGNORECASE),
        "Contains overly casual language",
    ),
    (re.compile(r"!{2,}"), "Contains excessive exclamation marks"),
    (re.compile(r"\?{2,}"), "Contains excessive question marks"),
)

BRIEF_WORD_COUNT = 10
CLEAN_BIO_WORD_COUNT = 20

# (max grammar issues, score cap); more issues than the last entry caps at 2
_GRAMMAR_CAPS: tuple[tuple[int, int], ...] = ((0, 10), (2, 8), (4, 6), (6, 4))
_GRAMMAR_CAP_FLOOR = 2

QUALITY_SCORES = {"excellent": 10, "good": 8, "fair": 5, "poor": 2}
DEFAULT_QUALITY_SCORE = 5


def _issue(category: str, message: str, severity: IssueSeverity) -> TextIssue:
    return TextIssue(
        message=message,
        short_message=message,
        category=category,
        severity=severity,
        type=category,
    )


def check_professionalism(text: str) -> list[TextIssue]:
    """Pattern-based professionalism findings for a bio."""
    issues: list[TextIssue] = []
    for pattern, message in _FILLER_PATTERNS:
        if pattern.search(text):
            issues.append(_issue("professionalism", message, IssueSeverity.HIGH))
    for pattern, message in _UNPROFESSIONAL_PATTERNS:
        if pattern.search(text):
            issues.append(_issue("professionalism", message, IssueSeverity.MEDIUM))

    words = text.split()
    unique = {w.lower() for w in words}
    if len(words) > 5 and len(unique) < len(words) * 0.5:
        issues.append(_issue("content", "Contains too much repetition", IssueSeverity.HIGH))
    if len(words) < BRIEF_WORD_COUNT:
        issues.append(_issue("content", "Bio is too brief for a professional profile", IssueSeverity.MEDIUM))
    return issues


def _high_severity_count(issues: list[TextIssue]) -> int:
    return sum(1 for i in issues if i.severity == IssueSeverity.HIGH)


def overall_quality(grammar_issues: list[TextIssue], professionalism_issues: list[TextIssue]) -> str:
    total = len(grammar_issues) + len(professionalism_issues)
    if _high_severity_count(professionalism_issues) > 0:
        return "poor"
    if total > 5:
        return "poor"
    if total > 3:
        return "fair"
    if total > 0:
        return "good"
    return "excellent"


def generate_summary(grammar_issues: list[TextIssue], text: str) -> dict[str, Any]:
    """Summary block for the LanguageTool backend."""
    professionalism_issues = check_professionalism(text)
    all_issues = grammar_issues + professionalism_issues
    return {
        "totalIssues": len(all_issues),
        "categories": dict(Counter(i.category for i in grammar_issues)),
        "overallQuality": overall_quality(grammar_issues, professionalism_issues),
        "professionalismIssues": [i.to_dict() for i in professionalism_issues],
        "suggestions": [i.message for i in all_issues[:5]],
    }


def calculate_quality_score(grammar_issues: list[TextIssue], text: str) -> int:
    """
    0-10 quality score from grammar matches plus professionalism checks.

    Each high-severity professionalism hit costs 3 (floor 2), the grammar
    issue count caps the result, and a clean bio of 20+ words scores 10.
    """
    score = 10
    high = _high_severity_count(check_professionalism(text))
    if high > 0:
        score = max(2, score - high * 3)

    issue_count = len(grammar_issues)
    cap = _GRAMMAR_CAP_FLOOR
    for max_issues, step_cap in _GRAMMAR_CAPS:
        if issue_count <= max_issues:
            cap = step_cap
            break
    score = min(score, cap)

    if len(text.split()) >= CLEAN_BIO_WORD_COUNT and issue_count == 0 and high == 0:
        score = 10
    return max(0, score)


def map_quality_to_score(quality: Any) -> int:
    """LLM overallQuality label -> 0-10 score; unknown labels score 5."""
    if not isinstance(quality, str):
        return DEFAULT_QUALITY_SCORE
    return QUALITY_SCORES.get(quality.strip().lower(), DEFAULT_QUALITY_SCORE)
