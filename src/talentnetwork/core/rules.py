"\"\"\"Keyword rule table for resume screening.\"\"\""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Phrases are matched as lowercase substrings of the normalized resume text.
PE_ROLES: tuple[str, ...] = (
    "operating partner",
    "value creation",
    "portfolio operations",
    "pe operating",
    "private equity operations",
    "portfolio company",
    "operating executive",
)

C_SUITE: tuple[str, ...] = (
    "ceo",
    "cfo",
    "coo",
    "cto",
    "chro",
    "cmo",
    "chief executive",
    "chief financial",
    "chief operating",
    "chief technology",
    "chief human",
    "chief marketing",
)

TOP_CONSULTING: tuple[str, ...] = (
    "mckinsey",
    "bain & company",
    "bain and company",
    "boston consulting",
    "bcg",
    "deloitte",
    "ernst & young",
    "ey ",
    "pwc",
    "pricewaterhousecoopers",
    "kpmg",
    "accenture",
)

MBA_PROGRAMS: tuple[str, ...] = (
    "harvard business",
    "stanford gsb",
    "wharton",
    "kellogg",
    "booth",
    "columbia business",
    "mit sloan",
    "haas",
    "tuck",
    "darden",
    "ross",
    "fuqua",
    "yale som",
    "mba",
)

LEADERSHIP_TITLES: tuple[str, ...] = (
    "vice president",
    "vp ",
    "svp",
    "senior vice president",
    "director",
    "head of",
    "managing director",
    "partner",
    "principal",
)

FUNCTIONAL_AREAS: tuple[str, ...] = (
    "operations",
    "finance",
    "technology",
    "sales",
    "human resources",
    "hr ",
    "supply chain",
    "procurement",
    "manufacturing",
    "revenue",
    "growth",
    "strategy",
)

INDUSTRIES: tuple[str, ...] = (
    "healthcare",
    "software",
    "saas",
    "technology",
    "industrials",
    "manufacturing",
    "business services",
    "consumer",
    "retail",
    "fintech",
    "financial services",
)

VALUE_CREATION: tuple[str, ...] = (
    "transformation",
    "turnaround",
    "integration",
    "m&a",
    "merger",
    "acquisition",
    "due diligence",
    "ebitda",
    "margin improvement",
    "cost reduction",
    "revenue growth",
    "operational excellence",
    "lean",
    "six sigma",
    "carve-out",
    "post-merger",
)

ENTRY_LEVEL: tuple[str, ...] = (
    "intern",
    "internship",
    "entry level",
    "junior",
    "associate",
    "analyst",
    "coordinator",
    "assistant",
)


@dataclass
class ScreeningRules:
    """Keyword groups and thresholds driving the screening engine."""

    pe_roles: tuple[str, ...] = PE_ROLES
    c_suite: tuple[str, ...] = C_SUITE
    top_consulting: tuple[str, ...] = TOP_CONSULTING
    mba_programs: tuple[str, ...] = MBA_PROGRAMS
    leadership_titles: tuple[str, ...] = LEADERSHIP_TITLES
    functional_areas: tuple[str, ...] = FUNCTIONAL_AREAS
    industries: tuple[str, ...] = INDUSTRIES
    value_creation: tuple[str, ...] = VALUE_CREATION
    entry_level: tuple[str, ...] = ENTRY_LEVEL

    qualifying_signal_count: int = 2
    extensive_experience_years: int = 10
    solid_experience_years: int = 7
    minimum_experience_years: int = 5
    min_functional_matches: int = 2
    min_value_creation_matches: int = 2
    qualified_score_floor: int = 60
    rejected_score_ceiling: int = 45
    qualified_subscore_floor: int = 5

    def __post_init__(self) -> None:
        for name in KEYWORD_GROUPS:
            setattr(self, name, tuple(phrase.lower() for phrase in getattr(self, name)))

    @classmethod
    def from_settings(cls, settings: dict[str, Any] | None) -> "ScreeningRules":
        """Build rules from a ``screening`` settings mapping."""
        if not settings:
            return cls()
        overrides: dict[str, Any] = {
            key: value for key, value in settings.items() if key != "keywords"
        }
        for name, phrases in (settings.get("keywords") or {}).items():
            if name not in KEYWORD_GROUPS:
                raise ValueError(f"Unknown keyword group: {name!r}")
            overrides[name] = tuple(phrases)
        return cls(**overrides)


KEYWORD_GROUPS: tuple[str, ...] = (
    "pe_roles",
    "c_suite",
    "top_consulting",
    "mba_programs",
    "leadership_titles",
    "functional_areas",
    "industries",
    "value_creation",
    "entry_level",
)


__all__ = ["KEYWORD_GROUPS", "ScreeningRules"]
