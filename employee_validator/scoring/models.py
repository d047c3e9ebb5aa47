"""
Result types returned by the field scorers and the aggregator.

All results are value objects created fresh per call. to_dict() produces the
camelCase JSON shape served by the API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from employee_validator.scoring.reference_data import FIELD_MAX_SCORE, FIELD_VALID_THRESHOLD


@dataclass
class ValidationResult:
    """
    Outcome of scoring one 20-point employee field.

    A non-empty errors list means scoring short-circuited at score 0.
    Warnings are advisory; they may already have reduced the score.
    """

    valid: bool
    score: int
    max_score: int = FIELD_MAX_SCORE
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    details: dict[str, Any] = field(default_factory=dict)
    """Field-specific attributes (phone carrier, email domain, ...)."""

    @classmethod
    def failed(cls, error: str, details: dict[str, Any] | None = None) -> ValidationResult:
        """Hard error: score 0, invalid, no warnings."""
        return cls(valid=False, score=0, errors=[error], details=details or {})

    @classmethod
    def scored(
        cls,
        score: int,
        warnings: list[str],
        details: dict[str, Any],
        *,
        max_score: int = FIELD_MAX_SCORE,
        threshold: int = FIELD_VALID_THRESHOLD,
    ) -> ValidationResult:
        """Clamp score into [0, max_score] and derive validity from the threshold."""
        clamped = max(0, min(score, max_score))
        return cls(
            valid=clamped >= threshold,
            score=clamped,
            max_score=max_score,
            warnings=warnings,
            details=details,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "score": self.score,
            "maxScore": self.max_score,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "details": dict(self.details),
        }


@dataclass
class PasswordResult:
    """Password strength tier (0-10) with requirement flags and analysis."""

    strength: int
    strength_text: str
    strength_color: str
    requirements: dict[str, bool]
    length: int
    char_types: int
    complexity: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "strength": self.strength,
            "strengthText": self.strength_text,
            "strengthColor": self.strength_color,
            "requirements": dict(self.requirements),
            "analysis": {
                "length": self.length,
                "charTypes": self.char_types,
                "complexity": self.complexity,
            },
        }


@dataclass
class AggregateSummary:
    """Composite of the five profile fields, scored out of 100."""

    valid: bool
    score: int
    max_score: int
    percentage: int
    strength_text: str
    strength_color: str
    valid_fields: int
    total_fields: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "score": self.score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
            "strengthText": self.strength_text,
            "strengthColor": self.strength_color,
            "validFields": self.valid_fields,
            "totalFields": self.total_fields,
        }
