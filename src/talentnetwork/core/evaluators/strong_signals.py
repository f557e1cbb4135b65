"\"\"\"Strong qualifying signals accumulated toward a qualification threshold.\"\"\""

from __future__ import annotations

from typing import Any

from ..rules import ScreeningRules
from ..text import ResumeFacts, contains_any, count_matches


class StrongSignalEvaluator:
    """Count secondary signals and raise sub-score floors for each one found."""

    method = "strong_signals"

    def __init__(self, *, config: ScreeningRules | None = None) -> None:
        self._config = config or ScreeningRules()

    def evaluate(self, facts: ResumeFacts) -> dict[str, Any]:
        config = self._config
        text = facts.normalized
        years = facts.years_experience

        signals: list[str] = []
        floors: dict[str, int] = {}
        reasons: list[str] = []
        strengths: list[str] = []

        def raise_floor(name: str, value: int) -> None:
            floors[name] = max(floors.get(name, 0), value)

        if contains_any(text, config.mba_programs):
            signals.append("mba")
            reasons.append("MBA from recognized program")
            strengths.append("Strong academic credentials")

        if years >= config.extensive_experience_years:
            signals.append("experience")
            raise_floor("seniority", 8)
            reasons.append(f"{years}+ years of experience")
            strengths.append("Extensive professional experience")
        elif years >= config.solid_experience_years:
            raise_floor("seniority", 6)

        if contains_any(text, config.leadership_titles):
            signals.append("leadership")
            raise_floor("seniority", 7)
            reasons.append("Senior leadership titles")
            strengths.append("Track record of leadership responsibility")

        functional_matches = count_matches(text, config.functional_areas)
        if functional_matches >= config.min_functional_matches:
            signals.append("functional_depth")
            raise_floor("functional_depth", 7 + min(functional_matches, 3))
            reasons.append("Strong functional expertise")
            strengths.append("Deep functional knowledge in key areas")

        if contains_any(text, config.industries):
            signals.append("industry")
            reasons.append("Relevant industry experience")

        value_matches = count_matches(text, config.value_creation)
        if value_matches >= config.min_value_creation_matches:
            signals.append("value_creation")
            raise_floor("culture_signals", 6 + min(value_matches, 4))
            reasons.append("Value creation language and experience")
            strengths.append("Speaks the language of PE value creation")

        return {
            "method": self.method,
            "signal_count": len(signals),
            "floors": floors,
            "reasons": reasons,
            "strengths": strengths,
            "metadata": {
                "signals": signals,
                "years_experience": years,
                "functional_matches": functional_matches,
                "value_creation_matches": value_matches,
            },
        }
