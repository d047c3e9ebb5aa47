"""Strength labels for password tiers, 20-point fields and the 100-point summary."""

from __future__ import annotations

from employee_validator.scoring.reference_data import (
    COLOR_AMBER,
    COLOR_GREEN,
    COLOR_RED,
    FIELD_MAX_SCORE,
    OVERALL_STRENGTH_BANDS,
    OVERALL_STRENGTH_NONE,
    OVERALL_STRENGTH_PERFECT,
    PASSWORD_STRENGTH,
)


def password_strength(tier: int) -> tuple[str, str]:
    """(text, color) for a 0-10 password tier; unknown tiers map to tier 0."""
    return PASSWORD_STRENGTH.get(tier, PASSWORD_STRENGTH[0])


def field_strength_text(score: int) -> str:
    """0 -> Invalid, 20 -> Valid, anything in between -> Partial."""
    if score == 0:
        return "Invalid"
    if score == FIELD_MAX_SCORE:
        return "Valid"
    return "Partial"


def field_strength_color(score: int) -> str:
    if score == 0:
        return COLOR_RED
    if score == FIELD_MAX_SCORE:
        return COLOR_GREEN
    return COLOR_AMBER


def _overall_band(score: int) -> tuple[str, str]:
    if score <= 0:
        return OVERALL_STRENGTH_NONE
    for upper, text, color in OVERALL_STRENGTH_BANDS:
        if score < upper:
            return text, color
    return OVERALL_STRENGTH_PERFECT


def overall_strength_text(score: int) -> str:
    """None / Poor (<40) / Fair (<60) / Good (<80) / Very Good (<100) / Perfect."""
    return _overall_band(score)[0]


def overall_strength_color(score: int) -> str:
    return _overall_band(score)[1]
