from __future__ import annotations

from typing import Any

import pytest

from talentnetwork.core import (
    AutoQualifierEvaluator,
    DisqualifierEvaluator,
    ResumeFacts,
    ScreeningEngine,
    ScreeningRules,
    SignalEvaluator,
    StrongSignalEvaluator,
    screen_resume,
)

CFO_RESUME = (
    "Chief Financial Officer at Acme Industrials. 10+ years of experience. "
    "Previously at Deloitte."
)

SIGNALS_ONLY_RESUME = (
    "Vice President of Operations and Finance in healthcare. MBA from Kellogg."
)

SHORT_CAREER_RESUME = (
    "Head of Growth and Strategy at a SaaS business. MBA, Wharton. "
    "3 years of experience."
)

INTERN_RESUME = "Summer Intern, 2024"


class StubEvaluator:
    def __init__(self, payload: dict[str, Any]):
        self.method = payload.get("method", "stub")
        self._payload = payload
        self.calls: list[ResumeFacts] = []

    def evaluate(self, facts: ResumeFacts) -> dict[str, Any]:
        self.calls.append(facts)
        return dict(self._payload)


def test_c_suite_and_consulting_resume_qualifies():
    result = screen_resume(CFO_RESUME)

    assert result.qualified is True
    assert result.score == 60
    assert result.reasons == [
        "C-suite executive experience",
        "Top-tier consulting background",
        "10+ years of experience",
        "Relevant industry experience",
    ]
    analysis = result.analysis
    assert analysis.seniority == 10
    assert analysis.functional_depth == 7
    assert analysis.pe_exposure == 5
    assert analysis.culture_signals == 5
    assert "Strategic consulting pedigree" in analysis.strengths
    assert analysis.concerns == []


def test_strong_signals_qualify_without_auto_qualifier():
    result = screen_resume(SIGNALS_ONLY_RESUME)

    assert result.qualified is True
    assert result.reasons == [
        "MBA from recognized program",
        "Senior leadership titles",
        "Strong functional expertise",
        "Relevant industry experience",
        "4 strong qualifying signals",
    ]
    assert result.analysis.seniority == 7
    assert result.analysis.functional_depth == 9
    assert result.score == 60


def test_short_career_overrides_strong_signals():
    result = screen_resume(SHORT_CAREER_RESUME)

    assert result.qualified is False
    assert result.reasons == ["Insufficient experience level"]
    assert result.analysis.concerns == ["Less than 5 years of experience"]
    assert result.score == 39


def test_short_career_is_exempt_for_c_suite():
    result = screen_resume("Chief Operating Officer. 3 years of experience.")

    assert result.qualified is True
    assert result.analysis.concerns == ["Less than 5 years of experience"]
    assert "Insufficient experience level" not in result.reasons


def test_intern_without_experience_estimate_is_rejected_without_reasons():
    result = screen_resume(INTERN_RESUME)

    assert result.qualified is False
    assert result.score == 0
    assert result.reasons == []
    assert result.analysis.concerns == [
        "Primarily entry-level or individual contributor roles"
    ]


def test_intern_with_short_year_span_gets_insufficient_experience():
    result = screen_resume("Summer Intern 2022 - 2024")

    assert result.qualified is False
    assert result.reasons == ["Insufficient experience level"]
    assert result.score <= 45


def test_director_title_matches_cto_substring():
    # "director" contains "cto"; plain substring matching is kept as-is
    result = screen_resume("Director of Finance")

    assert result.qualified is True
    assert result.analysis.seniority == 10


def test_score_is_capped_for_rich_resume():
    text = (
        "Operating Partner and former CEO. 20 years of experience. "
        "Led EBITDA growth, turnaround, due diligence, cost reduction and integration "
        "across operations, finance and strategy in healthcare. MBA, Wharton."
    )
    result = screen_resume(text)

    assert result.qualified is True
    assert 60 <= result.score <= 100
    assert result.score == 3 * 9 + 3 * 10 + 2 * 10 + 2 * 10
    assert all(
        0 <= value <= 10
        for value in (
            result.analysis.pe_exposure,
            result.analysis.seniority,
            result.analysis.functional_depth,
            result.analysis.culture_signals,
        )
    )


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        CFO_RESUME,
        SIGNALS_ONLY_RESUME,
        SHORT_CAREER_RESUME,
        INTERN_RESUME,
        "Managing Director, 30 years of experience, lean six sigma turnaround",
        "Analyst. Experience: 2 years.",
        "1" * 5000 + " years of experience",
        "Chief\u00a0Financial\u00a0Officer",
    ],
)
def test_score_bounds_follow_verdict(text: str):
    result = screen_resume(text)

    assert isinstance(result.score, int)
    assert 0 <= result.score <= 100
    if result.qualified:
        assert result.score >= 60
    else:
        assert result.score <= 45


@pytest.mark.parametrize("title", ["CEO", "Chief Marketing Officer", "CHRO", "cfo"])
def test_any_c_suite_title_gives_full_seniority(title: str):
    result = screen_resume(f"{title} at a regional retailer, 2 years of experience")

    assert result.qualified is True
    assert result.analysis.seniority == 10


def test_screening_is_deterministic():
    engine = ScreeningEngine()

    first = engine.screen(SIGNALS_ONLY_RESUME)
    second = engine.screen(SIGNALS_ONLY_RESUME)

    assert first.to_dict(include_signals=True) == second.to_dict(include_signals=True)


def test_none_text_is_treated_as_empty():
    result = screen_resume(None)

    assert result.qualified is False
    assert result.score == 0


def test_to_dict_uses_camel_case_analysis_and_optional_signals():
    payload = screen_resume(CFO_RESUME).to_dict(include_signals=True)

    assert payload["analysis"]["peExposure"] == 5
    assert payload["analysis"]["functionalDepth"] == 7
    assert [signal["method"] for signal in payload["signals"]] == [
        "auto_qualifier",
        "strong_signals",
        "disqualifiers",
    ]
    assert "signals" not in screen_resume(CFO_RESUME).to_dict()


def test_qualifying_signal_count_is_configurable():
    engine = ScreeningEngine(rules=ScreeningRules(qualifying_signal_count=5))

    result = engine.screen(SIGNALS_ONLY_RESUME)

    assert result.qualified is False
    assert result.score <= 45


def test_engine_uses_injected_evaluators():
    auto = StubEvaluator(
        {
            "method": "auto_qualifier",
            "qualifies": True,
            "floors": {"pe_exposure": 9},
            "reasons": ["stub reason"],
        }
    )
    strong = StubEvaluator({"method": "strong_signals", "signal_count": 0})
    disqualifiers = StubEvaluator({"method": "disqualifiers", "disqualifies": False})
    engine = ScreeningEngine(
        auto_qualifiers=auto, strong_signals=strong, disqualifiers=disqualifiers
    )

    result = engine.screen("anything")

    assert auto.calls and strong.calls and disqualifiers.calls
    assert auto.calls[0].normalized == "anything"
    assert result.qualified is True
    assert result.reasons == ["stub reason"]
    assert result.analysis.pe_exposure == 9
    assert result.score == 60


def test_engine_rejects_evaluator_result_without_method():
    auto = StubEvaluator({"qualifies": False})
    engine = ScreeningEngine(auto_qualifiers=auto)

    with pytest.raises(ValueError, match="method"):
        engine.screen("text")


def test_engine_rejects_unknown_subscore():
    auto = StubEvaluator({"method": "auto_qualifier", "floors": {"charisma": 3}})
    engine = ScreeningEngine(auto_qualifiers=auto)

    with pytest.raises(ValueError, match="charisma"):
        engine.screen("text")


def test_builtin_evaluators_satisfy_protocol():
    for evaluator in (
        AutoQualifierEvaluator(),
        StrongSignalEvaluator(),
        DisqualifierEvaluator(),
    ):
        assert isinstance(evaluator, SignalEvaluator)
