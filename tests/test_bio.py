"""
Tests for rule-based bio scoring (scoring.bio.validate_bio).
"""

from __future__ import annotations

import pytest

from employee_validator.scoring.bio import validate_bio


@pytest.mark.parametrize("bio", ["", "   ", None])
def test_blank_bio_is_required_error(bio):
    assert validate_bio(bio).errors == ["Bio is required"]


def test_too_short_reports_remaining_characters():
    result = validate_bio("abcdefghij abcdefgh")
    assert result.score == 0
    assert result.errors == ["Bio is too short (19/20 characters minimum)"]
    assert result.details == {"charCount": 19, "wordCount": 2, "charRemaining": 1}


def test_minimum_length_bio_without_capital_or_punctuation():
    result = validate_bio("we build web apps for you")
    assert result.score == 10
    assert result.valid is True
    assert result.warnings == [
        "Bio should start with a capital letter",
        "Bio should end with proper punctuation",
    ]


def test_full_rule_based_score_is_eighteen(good_bio):
    """Best possible basic score: 6 + 6 + 2 + 2 + 2."""
    result = validate_bio(good_bio)
    assert result.score == 18
    assert result.warnings == []
    assert result.details["charCount"] == 105
    assert result.details["wordCount"] == 17
    assert result.details["charRemaining"] == 395


def test_repetitive_words_penalized():
    result = validate_bio("Work work work work hard every day.")
    assert result.score == 12
    assert result.warnings == ["Bio contains repetitive words"]


def test_spam_phrases_penalized():
    result = validate_bio("Congratulations, you are a winner of our prize!")
    assert result.score == 10
    assert "Bio may contain spam-like content" in result.warnings


def test_spam_match_requires_word_boundary():
    result = validate_bio("Coached the winners of two regional hackathons.")
    assert "Bio may contain spam-like content" not in result.warnings


def test_very_long_bio_warns():
    bio = "Intro " + " ".join(f"word{i}" for i in range(100)) + "."
    result = validate_bio(bio)
    assert result.score == 18
    assert result.warnings == ["Bio is very long (over 500 characters)"]
    assert result.details["charRemaining"] == 0


def test_few_words_warns():
    result = validate_bio("Supercalifragilistic expialidocious.")
    assert "Consider adding more detail to your bio" in result.warnings
