"""
Email scoring (0-20).

Shape check, disposable-provider penalty, provider classification
(legitimate > educational > business-shaped > unknown), username length and
test-address prefix.
"""

from __future__ import annotations

import re

from employee_validator.scoring.models import ValidationResult
from employee_validator.scoring.reference_data import (
    DISPOSABLE_EMAIL_PROVIDERS,
    EDUCATIONAL_SUFFIXES,
    LEGITIMATE_EMAIL_PROVIDERS,
)

_EMAIL_SHAPE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_TEST_PREFIX = re.compile(r"^(test|spam|fake|temp|noreply|no-reply)")

DISPOSABLE_PENALTY = 4


def _matches_domain(domain: str, entry: str) -> bool:
    """Exact match or subdomain of entry."""
    return domain == entry or domain.endswith("." + entry)


def is_disposable(domain: str) -> bool:
    return any(_matches_domain(domain, d) for d in DISPOSABLE_EMAIL_PROVIDERS)


def is_legit_provider(domain: str) -> bool:
    for provider in LEGITIMATE_EMAIL_PROVIDERS:
        if "." in provider:
            if _matches_domain(domain, provider):
                return True
        elif domain.endswith("." + provider):
            return True
    return False


def is_educational(domain: str, tld: str) -> bool:
    return tld == "edu" or domain.endswith(EDUCATIONAL_SUFFIXES)


def is_business_domain(domain_parts: list[str], tld: str) -> bool:
    return len(domain_parts) >= 2 and len(domain_parts[0]) >= 2 and 2 <= len(tld) <= 6


def validate_email(email: str | None) -> ValidationResult:
    """Score an email address. Input is trimmed and lowercased before every check."""
    if not email or not email.strip():
        return ValidationResult.failed("Email is required")

    normalized = email.strip().lower()
    if not _EMAIL_SHAPE.match(normalized):
        return ValidationResult.failed("Invalid email format")

    warnings: list[str] = []
    score = 8

    local_part, domain = normalized.split("@", 1)
    domain_parts = domain.split(".")
    tld = domain_parts[-1]

    disposable = is_disposable(domain)
    if disposable:
        warnings.append("Disposable/temporary email detected")
        score = max(0, score - DISPOSABLE_PENALTY)

    legit = is_legit_provider(domain)
    educational = is_educational(domain, tld)
    business = is_business_domain(domain_parts, tld)

    if legit:
        score += 6
    elif educational:
        warnings.append("Educational email detected")
        score += 4
    elif business:
        warnings.append("Custom/business domain")
        score += 2
    else:
        warnings.append("Unknown email provider")

    if len(local_part) >= 3:
        score += 4
    else:
        warnings.append("Email username is very short")

    if _TEST_PREFIX.match(local_part):
        warnings.append("Email appears to be a test/temporary address")
    else:
        score += 2

    return ValidationResult.scored(
        score,
        warnings,
        {
            "localPart": local_part,
            "domain": domain,
            "tld": tld,
            "isLegitProvider": legit,
            "isEducational": educational,
            "isBusinessDomain": business,
            "isDisposable": disposable,
        },
    )
