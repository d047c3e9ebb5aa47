"""Comma-separated skills scoring (0-20)."""

from __future__ import annotations

import re
from typing import Any

from employee_validator.scoring.models import ValidationResult

_VALID_SKILL = re.compile(r"^[a-zA-Z0-9\s\-+#./]+$")

MIN_SKILL_LENGTH = 2
MAX_SKILL_LENGTH = 50


def parse_skills(raw: str) -> list[str]:
    """Split on commas, trim, drop empties. Order and duplicates are kept."""
    return [s.strip() for s in raw.split(",") if s.strip()]


def skill_issue(skill: str) -> str | None:
    """Reason a single skill is rejected, or None if it is acceptable."""
    if len(skill) < MIN_SKILL_LENGTH:
        return "Too short"
    if len(skill) > MAX_SKILL_LENGTH:
        return "Too long"
    if not _VALID_SKILL.match(skill):
        return "Contains invalid characters"
    return None


def _count_bonus(count: int) -> int:
    if count >= 5:
        return 6
    if count >= 3:
        return 4
    if count >= 2:
        return 2
    return 0


def validate_skills(skills_input: str | None) -> ValidationResult:
    """
    Score a comma-separated skills list.

    Base 4, then bonuses for how many skills are listed, for no
    case-insensitive duplicates (partial credit otherwise), and for every
    skill passing the length and character checks.
    """
    if not skills_input or not skills_input.strip():
        return ValidationResult.failed("Skills are required")

    skills = parse_skills(skills_input)
    if not skills:
        return ValidationResult.failed("Please provide at least one skill")

    warnings: list[str] = []
    score = 4

    count_bonus = _count_bonus(len(skills))
    if count_bonus:
        score += count_bonus
    else:
        warnings.append("Consider adding more skills (3+ recommended)")

    unique_count = len({s.lower() for s in skills})
    if unique_count == len(skills):
        score += 4
    else:
        warnings.append("Duplicate skills detected")
        score += 2

    valid_skills: list[str] = []
    invalid_skills: list[dict[str, Any]] = []
    for skill in skills:
        reason = skill_issue(skill)
        if reason is None:
            valid_skills.append(skill)
        else:
            invalid_skills.append({"skill": skill, "reason": reason})

    if not invalid_skills:
        score += 6
    else:
        listed = ", ".join(f'"{item["skill"]}"' for item in invalid_skills)
        warnings.append(f"Some skills have issues: {listed}")
        if len(invalid_skills) < len(skills) / 2:
            score += 3

    return ValidationResult.scored(
        score,
        warnings,
        {
            "totalSkills": len(skills),
            "validSkills": valid_skills,
            "invalidSkills": invalid_skills,
            "uniqueCount": unique_count,
        },
    )
