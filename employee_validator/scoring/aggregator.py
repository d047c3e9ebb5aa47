"""
Composite scoring across the five profile fields.

Password is scored on its own 0-10 tier and is not part of the composite.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from employee_validator.scoring.bio import validate_bio
from employee_validator.scoring.email_address import validate_email
from employee_validator.scoring.models import AggregateSummary, ValidationResult
from employee_validator.scoring.name import validate_full_name
from employee_validator.scoring.phone import validate_cambodian_phone
from employee_validator.scoring.reference_data import SUMMARY_MAX_SCORE
from employee_validator.scoring.skills import validate_skills
from employee_validator.scoring.strength import (
    field_strength_color,
    field_strength_text,
    overall_strength_color,
    overall_strength_text,
)

FIELD_SCORERS = {
    "name": validate_full_name,
    "email": validate_email,
    "phone": validate_cambodian_phone,
    "bio": validate_bio,
    "skills": validate_skills,
}


def field_response(field: str, result: ValidationResult) -> dict[str, Any]:
    """Per-field JSON payload: result plus field name and 20-point strength label."""
    out: dict[str, Any] = {"field": field}
    out.update(result.to_dict())
    out["strengthText"] = field_strength_text(result.score)
    out["strengthColor"] = field_strength_color(result.score)
    return out


def summarize(results: Mapping[str, ValidationResult]) -> AggregateSummary:
    """Combine field results: AND of validity, sum of scores, 100-point strength band."""
    total = sum(r.score for r in results.values())
    return AggregateSummary(
        valid=all(r.valid for r in results.values()),
        score=total,
        max_score=SUMMARY_MAX_SCORE,
        percentage=round(total / SUMMARY_MAX_SCORE * 100),
        strength_text=overall_strength_text(total),
        strength_color=overall_strength_color(total),
        valid_fields=sum(1 for r in results.values() if r.valid),
        total_fields=len(results),
    )


def validate_all(
    name: str | None = None,
    email: str | None = None,
    phone: str | None = None,
    bio: str | None = None,
    skills: str | None = None,
) -> dict[str, Any]:
    """Score all five fields and return {"results": {...}, "summary": {...}}."""
    inputs = {"name": name, "email": email, "phone": phone, "bio": bio, "skills": skills}
    results = {field: FIELD_SCORERS[field](value) for field, value in inputs.items()}
    return {
        "results": {field: field_response(field, r) for field, r in results.items()},
        "summary": summarize(results).to_dict(),
    }
