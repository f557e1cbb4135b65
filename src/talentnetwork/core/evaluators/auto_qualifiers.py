"\"\"\"Auto-qualifier signals: PE operating roles, C-suite titles, top consulting.\"\"\""

from __future__ import annotations

from typing import Any

from ..rules import ScreeningRules
from ..text import ResumeFacts, matched_phrases


class AutoQualifierEvaluator:
    """Qualify outright on any PE role, C-suite title or top-tier firm mention."""

    method = "auto_qualifier"

    def __init__(self, *, config: ScreeningRules | None = None) -> None:
        self._config = config or ScreeningRules()

    def evaluate(self, facts: ResumeFacts) -> dict[str, Any]:
        floors: dict[str, int] = {}
        reasons: list[str] = []
        strengths: list[str] = []

        pe_hits = matched_phrases(facts.normalized, self._config.pe_roles)
        if pe_hits:
            floors["pe_exposure"] = 9
            reasons.append("Direct PE operating experience")
            strengths.append("Has worked directly in PE portfolio operations")

        c_suite_hits = matched_phrases(facts.normalized, self._config.c_suite)
        if c_suite_hits:
            floors["seniority"] = 10
            reasons.append("C-suite executive experience")
            strengths.append("Proven executive leadership at the highest level")

        consulting_hits = matched_phrases(facts.normalized, self._config.top_consulting)
        if consulting_hits:
            floors["functional_depth"] = 7
            reasons.append("Top-tier consulting background")
            strengths.append("Strategic consulting pedigree")

        return {
            "method": self.method,
            "qualifies": bool(pe_hits or c_suite_hits or consulting_hits),
            "floors": floors,
            "reasons": reasons,
            "strengths": strengths,
            "metadata": {
                "pe_roles": pe_hits,
                "c_suite": c_suite_hits,
                "top_consulting": consulting_hits,
            },
        }
