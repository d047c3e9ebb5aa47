"""
Password strength scoring (0-10 tier).

Eight independent requirement flags earn cumulative points, plus length and
"all four character classes" bonuses. The diversity bonus overlaps the
per-class points on purpose; scoring is additive, not tiered.
"""

from __future__ import annotations

import re

from employee_validator.scoring.models import PasswordResult
from employee_validator.scoring.reference_data import COMMON_PASSWORDS, SEQUENCES
from employee_validator.scoring.strength import password_strength

MAX_TIER = 10
MIN_LENGTH = 12

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(r"[^A-Za-z0-9]")

# Points per satisfied requirement
REQUIREMENT_POINTS = {
    "length": 2,
    "uppercase": 1,
    "lowercase": 1,
    "numbers": 1,
    "special": 1,
    "noSequence": 1,
    "noRepeat": 1,
    "noCommon": 2,
}


def has_sequential_chars(password: str) -> bool:
    """True if any 3-char ascending/descending letter or digit run appears (case-insensitive)."""
    lowered = password.lower()
    for seq in SEQUENCES:
        for i in range(len(seq) - 2):
            if seq[i:i + 3] in lowered:
                return True
    return False


def has_repeated_chars(password: str) -> bool:
    """True if the same character appears three times in a row."""
    for i in range(len(password) - 2):
        if password[i] == password[i + 1] == password[i + 2]:
            return True
    return False


def contains_common_word(password: str) -> bool:
    lowered = password.lower()
    return any(word in lowered for word in COMMON_PASSWORDS)


def _empty_result() -> PasswordResult:
    text, color = password_strength(0)
    return PasswordResult(
        strength=0,
        strength_text=text,
        strength_color=color,
        requirements={
            "length": False,
            "uppercase": False,
            "lowercase": False,
            "numbers": False,
            "special": False,
            "noSequence": True,
            "noRepeat": True,
            "noCommon": True,
        },
        length=0,
        char_types=0,
        complexity="Low",
    )


def _complexity(tier: int) -> str:
    if tier >= 7:
        return "High"
    if tier >= 4:
        return "Medium"
    return "Low"


def validate_password(password: str | None) -> PasswordResult:
    """
    Score a password into a 0-10 tier.

    Empty or missing input returns the fixed "None" result. Never raises.
    """
    if not password:
        return _empty_result()

    requirements = {
        "length": len(password) >= MIN_LENGTH,
        "uppercase": len(_UPPER.findall(password)) >= 2,
        "lowercase": len(_LOWER.findall(password)) >= 2,
        "numbers": len(_DIGIT.findall(password)) >= 2,
        "special": len(_SPECIAL.findall(password)) >= 2,
        "noSequence": not has_sequential_chars(password),
        "noRepeat": not has_repeated_chars(password),
        "noCommon": not contains_common_word(password),
    }

    strength = sum(REQUIREMENT_POINTS[name] for name, met in requirements.items() if met)
    if len(password) >= 16:
        strength += 1
    if len(password) >= 20:
        strength += 1

    char_types = sum(
        1 for pattern in (_UPPER, _LOWER, _DIGIT, _SPECIAL) if pattern.search(password)
    )
    if char_types == 4:
        strength += 1
    strength = min(strength, MAX_TIER)

    text, color = password_strength(strength)
    return PasswordResult(
        strength=strength,
        strength_text=text,
        strength_color=color,
        requirements=requirements,
        length=len(password),
        char_types=char_types,
        complexity=_complexity(strength),
    )
