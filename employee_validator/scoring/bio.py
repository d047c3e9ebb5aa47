"""
Short bio scoring (0-20), rule-based only.

AI enrichment lives in ai_engine.enrichment and rescales this result.
"""

from __future__ import annotations

import re
from collections import Counter

from employee_validator.scoring.models import ValidationResult
from employee_validator.scoring.reference_data import (
    BIO_LONG_CHARS,
    BIO_MIN_CHARS,
    BIO_SPAM_PHRASES,
)

_LEADING_CAPITAL = re.compile(r"^[A-Z]")
_TERMINAL_PUNCTUATION = re.compile(r"[.!?]$")
_SPAM = re.compile(
    r"\b(" + "|".join(re.escape(p) for p in BIO_SPAM_PHRASES) + r")\b",
    re.IGNORECASE,
)

REPETITION_PENALTY = 2
SPAM_PENALTY = 4


def _length_bonus(char_count: int) -> int:
    if char_count >= 100:
        return 6
    if char_count >= 50:
        return 4
    return 2


def validate_bio(bio: str | None) -> ValidationResult:
    """
    Score a short bio.

    Base 6 once the 20-character minimum is met; bonuses for length, word
    count, leading capital and terminal punctuation; penalties for one word
    dominating the text and for spam phrases.
    """
    if not bio or not bio.strip():
        return ValidationResult.failed("Bio is required")

    trimmed = bio.strip()
    words = trimmed.split()
    word_count = len(words)
    char_count = len(trimmed)

    if char_count < BIO_MIN_CHARS:
        return ValidationResult.failed(
            f"Bio is too short ({char_count}/{BIO_MIN_CHARS} characters minimum)",
            {
                "charCount": char_count,
                "wordCount": word_count,
                "charRemaining": BIO_MIN_CHARS - char_count,
            },
        )

    warnings: list[str] = []
    score = 6 + _length_bonus(char_count)

    if char_count > BIO_LONG_CHARS:
        warnings.append(f"Bio is very long (over {BIO_LONG_CHARS} characters)")

    if word_count >= 5:
        score += 2
    else:
        warnings.append("Consider adding more detail to your bio")

    max_freq = max(Counter(w.lower() for w in words).values())
    if max_freq > word_count / 3 and word_count > 5:
        warnings.append("Bio contains repetitive words")
        score = max(0, score - REPETITION_PENALTY)

    if _LEADING_CAPITAL.match(trimmed):
        score += 2
    else:
        warnings.append("Bio should start with a capital letter")

    if _TERMINAL_PUNCTUATION.search(trimmed):
        score += 2
    else:
        warnings.append("Bio should end with proper punctuation")

    if _SPAM.search(trimmed):
        warnings.append("Bio may contain spam-like content")
        score = max(0, score - SPAM_PENALTY)

    return ValidationResult.scored(
        score,
        warnings,
        {
            "charCount": char_count,
            "wordCount": word_count,
            "charRemaining": max(0, BIO_LONG_CHARS - char_count),
        },
    )
