from __future__ import annotations

import pytest

from talentnetwork.core.text import (
    ResumeFacts,
    count_matches,
    estimate_years_experience,
    matched_phrases,
    normalize_text,
)


def test_normalize_text_lowercases_and_strips_punctuation():
    assert normalize_text("M&A, P&L; Chief-Operating") == "m a  p l  chief operating"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("12+ years of experience in operations", 12),
        ("Experience: 8 years", 8),
        ("EXPERIENCE - 15 YEARS", 15),
        ("5 years experience, later 11 years exp in finance", 11),
        ("Acme 2008 - 2019, Beta 2019 - present", 11),
        ("Graduated 2015", 0),
        ("", 0),
    ],
)
def test_estimate_years_experience(text: str, expected: int):
    assert estimate_years_experience(text) == expected


def test_overlong_digit_runs_are_not_read_as_years():
    huge = "1" * 5000

    assert estimate_years_experience(f"{huge} years of experience") == 0
    assert estimate_years_experience(f"Experience: {huge} years") == 0
    assert estimate_years_experience(f"{huge} years of experience, 12 years of experience") == 12


def test_normalize_text_keeps_unicode_whitespace():
    assert normalize_text("Chief\u00a0Operating\u2003Officer") == "chief\u00a0operating\u2003officer"
    assert normalize_text("Caf\u00e9 P&L") == "caf  p l"


def test_explicit_years_take_precedence_over_calendar_span():
    assert estimate_years_experience("1990 to 2020, 4 years of experience") == 4


def test_matched_phrases_keeps_rule_order():
    normalized = normalize_text("Strategy and Operations lead")

    assert matched_phrases(normalized, ("operations", "finance", "strategy")) == [
        "operations",
        "strategy",
    ]
    assert count_matches(normalized, ("operations", "finance", "strategy")) == 2


def test_punctuated_phrases_never_match_normalized_text():
    normalized = normalize_text("Led M&A integration")

    assert matched_phrases(normalized, ("m&a", "integration")) == ["integration"]


def test_resume_facts_from_text():
    facts = ResumeFacts.from_text("CFO, 10 years of experience")

    assert facts.raw == "CFO, 10 years of experience"
    assert facts.normalized == "cfo  10 years of experience"
    assert facts.years_experience == 10
    assert ResumeFacts.from_text(None).normalized == ""
