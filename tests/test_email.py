"""
Tests for email scoring (scoring.email_address.validate_email).
"""

from __future__ import annotations

import pytest

from employee_validator.scoring.email_address import is_disposable, is_legit_provider, validate_email


@pytest.mark.parametrize("email", ["", "   ", None])
def test_blank_email_is_required_error(email):
    result = validate_email(email)
    assert result.errors == ["Email is required"]
    assert result.score == 0


@pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@c.com", "@gmail.com"])
def test_malformed_email(email):
    result = validate_email(email)
    assert result.errors == ["Invalid email format"]
    assert result.valid is False


def test_known_provider_scores_full():
    result = validate_email("john.doe@gmail.com")
    assert result.score == 20
    assert result.warnings == []
    assert result.details["isLegitProvider"] is True
    assert result.details["localPart"] == "john.doe"
    assert result.details["domain"] == "gmail.com"
    assert result.details["tld"] == "com"


def test_email_is_trimmed_and_lowercased():
    result = validate_email("  John.Doe@GMAIL.com  ")
    assert result.score == 20
    assert result.details["localPart"] == "john.doe"


def test_short_unknown_domain():
    """'a@a.co': one-letter domain label is neither known nor business-shaped."""
    result = validate_email("a@a.co")
    assert result.score == 10
    assert result.valid is True
    assert result.warnings == ["Unknown email provider", "Email username is very short"]
    assert result.details["isBusinessDomain"] is False


def test_business_domain():
    result = validate_email("john@acme.io")
    assert result.score == 16
    assert result.warnings == ["Custom/business domain"]
    assert result.details["isBusinessDomain"] is True


def test_disposable_provider_penalized():
    result = validate_email("user@yopmail.com")
    # 8 - 4 (disposable) + 2 (business-shaped) + 4 (username) + 2 (no test prefix)
    assert result.score == 12
    assert result.details["isDisposable"] is True
    assert "Disposable/temporary email detected" in result.warnings


def test_disposable_subdomain_and_test_prefix():
    result = validate_email("test@mail.yopmail.com")
    assert result.score == 10
    assert "Email appears to be a test/temporary address" in result.warnings


def test_disposable_match_is_not_a_bare_substring():
    result = validate_email("x@notyopmail.com")
    assert result.details["isDisposable"] is False
    assert result.score == 12


def test_noreply_prefix_loses_two_points():
    result = validate_email("noreply@company.com")
    assert result.score == 14


@pytest.mark.parametrize("email", ["student@rupp.edu.kh", "prof@mit.edu", "don@ox.ac.uk"])
def test_educational_domains_count_as_known_providers(email):
    result = validate_email(email)
    assert result.score == 20
    assert result.details["isLegitProvider"] is True
    assert result.details["isEducational"] is True


def test_domain_helpers():
    assert is_disposable("mailinator.com") is True
    assert is_disposable("eu.mailinator.com") is True
    assert is_disposable("gmail.com") is False
    assert is_legit_provider("gmail.com") is True
    assert is_legit_provider("fakegmail.com") is False
    assert is_legit_provider("edu") is False
