"\"\"\"Experience-level disqualifiers and entry-level concerns.\"\"\""

from __future__ import annotations

from typing import Any

from ..rules import ScreeningRules
from ..text import ResumeFacts, contains_any

INSUFFICIENT_EXPERIENCE = "Insufficient experience level"


class DisqualifierEvaluator:
    """Flag short careers and entry-level profiles.

    A career shorter than the minimum overrides any qualification unless the
    resume carries a C-suite title or a PE operating role.
    """

    method = "disqualifiers"

    def __init__(self, *, config: ScreeningRules | None = None) -> None:
        self._config = config or ScreeningRules()

    def evaluate(self, facts: ResumeFacts) -> dict[str, Any]:
        config = self._config
        text = facts.normalized
        years = facts.years_experience

        concerns: list[str] = []
        override = False

        short_career = 0 < years < config.minimum_experience_years
        if short_career:
            concerns.append(f"Less than {config.minimum_experience_years} years of experience")
            exempt = contains_any(text, config.c_suite) or contains_any(text, config.pe_roles)
            override = not exempt

        entry_level = contains_any(text, config.entry_level) and not contains_any(
            text, config.leadership_titles
        )
        if entry_level:
            concerns.append("Primarily entry-level or individual contributor roles")

        return {
            "method": self.method,
            "disqualifies": override,
            "override_reasons": [INSUFFICIENT_EXPERIENCE] if override else [],
            "concerns": concerns,
            "metadata": {
                "years_experience": years,
                "short_career": short_career,
                "entry_level": entry_level,
            },
        }
