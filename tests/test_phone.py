"""
Tests for Cambodian phone scoring (scoring.phone.validate_cambodian_phone).
"""

from __future__ import annotations

import pytest

from employee_validator.scoring.phone import normalize_phone, validate_cambodian_phone


@pytest.mark.parametrize("phone", ["", "   ", None])
def test_blank_phone_is_required_error(phone):
    result = validate_cambodian_phone(phone)
    assert result.errors == ["Phone number is required"]


def test_international_mobile_scores_full():
    result = validate_cambodian_phone("+855 12 345 678")
    assert result.score == 20
    assert result.valid is True
    assert result.warnings == []
    assert result.details == {
        "originalInput": "+855 12 345 678",
        "cleanNumber": "85512345678",
        "nationalNumber": "12345678",
        "digitCount": 11,
        "internationalFormat": "+85512345678",
        "prefix": "12",
        "type": "Mobile",
        "carrier": "Cellcard",
        "hasCountryCode": True,
    }


@pytest.mark.parametrize("phone", ["012 345 678", "(012) 345-678", "012.345.678"])
def test_local_mobile_format(phone):
    result = validate_cambodian_phone(phone)
    assert result.score == 18
    assert result.warnings == ["Consider using international format (+855)"]
    assert result.details["nationalNumber"] == "12345678"
    assert result.details["hasCountryCode"] is False


def test_landline_has_no_carrier():
    result = validate_cambodian_phone("023 456 789")
    assert result.score == 16
    assert result.details["type"] == "Landline"
    assert result.details["carrier"] == "N/A"


def test_mobile_prefix_without_known_carrier():
    result = validate_cambodian_phone("+855 91 234 567")
    assert result.score == 18
    assert result.details["type"] == "Mobile"
    assert result.details["carrier"] == "Unknown"


def test_unrecognized_prefix():
    result = validate_cambodian_phone("+855 50 123 456")
    assert result.score == 12
    assert result.details["type"] == "Unknown"
    assert result.warnings == ["Unrecognized Cambodian prefix: 50"]


def test_carrier_prefix_outside_mobile_and_landline_sets():
    """38 maps to a carrier but is not in either prefix set."""
    result = validate_cambodian_phone("+855 38 123 456")
    assert result.score == 12
    assert result.details["carrier"] == "N/A"


def test_non_digit_characters():
    result = validate_cambodian_phone("012-abc-678")
    assert result.errors == ["Phone number should contain only digits"]
    assert result.details == {"cleanPhone": "012abc678"}


@pytest.mark.parametrize("phone,count", [("12345", 5), ("+855 12 345 678 999", 14)])
def test_digit_count_out_of_range(phone, count):
    result = validate_cambodian_phone(phone)
    assert result.errors == ["Phone number must be 9-12 digits"]
    assert result.details["digitCount"] == count


def test_normalize_phone():
    assert normalize_phone("85512345678") == ("12345678", True)
    assert normalize_phone("012345678") == ("12345678", False)
    assert normalize_phone("12345678") == ("12345678", False)
