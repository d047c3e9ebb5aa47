"""
Tests for full-name scoring (scoring.name.validate_full_name).
"""

from __future__ import annotations

import pytest

from employee_validator.scoring.name import validate_full_name


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_name_is_required_error(name):
    result = validate_full_name(name)
    assert result.valid is False
    assert result.score == 0
    assert result.errors == ["Name is required"]
    assert result.warnings == []


def test_two_part_capitalized_name_scores_full():
    result = validate_full_name("Sok Dara")
    assert result.score == 20
    assert result.valid is True
    assert result.warnings == []
    assert result.details == {"length": 8, "parts": 2, "firstName": "Sok", "lastName": "Dara"}


def test_name_is_trimmed_before_scoring():
    result = validate_full_name("  Sok Dara  ")
    assert result.score == 20
    assert result.details["length"] == 8


def test_lowercase_name_loses_capitalization_points():
    result = validate_full_name("sok dara")
    assert result.score == 16
    assert result.warnings == ["Names should start with uppercase letters"]


def test_single_part_name_warns_about_last_name():
    result = validate_full_name("Cher")
    assert result.score == 16
    assert "Consider providing both first and last name" in result.warnings
    assert result.details["lastName"] == ""


def test_single_character_name():
    result = validate_full_name("A")
    assert result.score == 12
    assert "Name seems too short" in result.warnings


def test_digits_cost_unusual_chars_and_penalty():
    result = validate_full_name("John2 Doe3")
    # 4 + 4 + 4 + 0 (regex) + 4 (caps) - 4 (digits)
    assert result.score == 12
    assert "Name contains unusual characters" in result.warnings
    assert "Name contains numbers" in result.warnings


def test_all_digit_name_is_still_valid_at_threshold():
    """'12345' has no letters but digits are caseless, so it lands exactly on 8."""
    result = validate_full_name("12345")
    assert result.score == 8
    assert result.valid is True


@pytest.mark.parametrize("name", ["José García", "Jean-Luc O'Neil", "សុខ ដារា", "Dr. Sok Dara"])
def test_accented_khmer_and_punctuated_names_score_full(name):
    """Latin extended, Khmer (caseless), hyphen, apostrophe and period are all accepted."""
    result = validate_full_name(name)
    assert result.score == 20
    assert result.warnings == []
