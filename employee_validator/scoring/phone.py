"""
Cambodian phone number scoring (0-20).

Accepts local (0xx...), bare national, or international (+855 ...) input with
spaces, hyphens, parentheses and periods as separators.
"""

from __future__ import annotations

import re

from employee_validator.scoring.models import ValidationResult
from employee_validator.scoring.reference_data import (
    CAMBODIA_COUNTRY_CODE,
    CAMBODIAN_CARRIERS,
    CAMBODIAN_LANDLINE_PREFIXES,
    CAMBODIAN_MOBILE_PREFIXES,
)

_SEPARATORS = re.compile(r"[\s\-().+]")
_DIGITS = re.compile(r"[0-9]+")

MIN_DIGITS = 9
MAX_DIGITS = 12


def normalize_phone(clean: str) -> tuple[str, bool]:
    """Strip country code 855 or one trunk 0. Returns (national_number, has_country_code)."""
    if clean.startswith(CAMBODIA_COUNTRY_CODE):
        return clean[len(CAMBODIA_COUNTRY_CODE):], True
    if clean.startswith("0"):
        return clean[1:], False
    return clean, False


def validate_cambodian_phone(phone: str | None) -> ValidationResult:
    """Score a Cambodian phone number."""
    if not phone or not phone.strip():
        return ValidationResult.failed("Phone number is required")

    clean = _SEPARATORS.sub("", phone)
    if not _DIGITS.fullmatch(clean):
        return ValidationResult.failed(
            "Phone number should contain only digits",
            {"cleanPhone": clean},
        )
    if not MIN_DIGITS <= len(clean) <= MAX_DIGITS:
        return ValidationResult.failed(
            f"Phone number must be {MIN_DIGITS}-{MAX_DIGITS} digits",
            {"cleanPhone": clean, "digitCount": len(clean)},
        )

    warnings: list[str] = []
    score = 8

    national, has_country_code = normalize_phone(clean)
    prefix = national[:2]
    is_mobile = prefix in CAMBODIAN_MOBILE_PREFIXES
    is_landline = prefix in CAMBODIAN_LANDLINE_PREFIXES

    if is_mobile or is_landline:
        score += 6
    else:
        warnings.append(f"Unrecognized Cambodian prefix: {prefix}")

    carrier = CAMBODIAN_CARRIERS.get(prefix, "Unknown")

    if has_country_code:
        score += 4
    else:
        warnings.append("Consider using international format (+855)")
        score += 2

    if is_mobile and carrier != "Unknown":
        score += 2

    if is_mobile:
        phone_type = "Mobile"
    elif is_landline:
        phone_type = "Landline"
    else:
        phone_type = "Unknown"

    return ValidationResult.scored(
        score,
        warnings,
        {
            "originalInput": phone,
            "cleanNumber": clean,
            "nationalNumber": national,
            "digitCount": len(clean),
            "internationalFormat": f"+{CAMBODIA_COUNTRY_CODE}{national}",
            "prefix": prefix,
            "type": phone_type,
            "carrier": carrier if is_mobile else "N/A",
            "hasCountryCode": has_country_code,
        },
    )
