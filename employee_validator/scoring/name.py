"""Full name scoring (0-20)."""

from __future__ import annotations

import re

from employee_validator.scoring.models import ValidationResult

# Latin, Latin-1 Supplement / Extended-A/B, Khmer, whitespace, hyphen, apostrophe, period
_VALID_NAME = re.compile(r"^[a-zA-Z\u00C0-\u024F\u1780-\u17FF\s\-'.]+$")
_DIGIT = re.compile(r"[0-9]")

DIGIT_PENALTY = 4


def validate_full_name(name: str | None) -> ValidationResult:
    """
    Score a full name.

    Base 4 for any non-blank name, +4 each for length >= 2, two or more parts,
    allowed characters only, and capitalized parts. Digits cost 4 points.
    """
    if not name or not name.strip():
        return ValidationResult.failed("Name is required")

    trimmed = name.strip()
    parts = trimmed.split()
    warnings: list[str] = []
    score = 4

    if len(trimmed) >= 2:
        score += 4
    else:
        warnings.append("Name seems too short")

    if len(parts) >= 2:
        score += 4
    else:
        warnings.append("Consider providing both first and last name")

    if _VALID_NAME.match(trimmed):
        score += 4
    else:
        warnings.append("Name contains unusual characters")

    # Caseless scripts (Khmer) pass: the first char equals its own uppercase
    if all(part[0] == part[0].upper() for part in parts):
        score += 4
    else:
        warnings.append("Names should start with uppercase letters")

    if _DIGIT.search(trimmed):
        warnings.append("Name contains numbers")
        score = max(0, score - DIGIT_PENALTY)

    return ValidationResult.scored(
        score,
        warnings,
        {
            "length": len(trimmed),
            "parts": len(parts),
            "firstName": parts[0] if parts else "",
            "lastName": parts[-1] if len(parts) > 1 else "",
        },
    )
