"\"\"\"Resume text normalization and experience estimation.\"\"\""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

# ASCII word characters only; any Unicode whitespace is left as it is.
_PUNCTUATION = re.compile(r"[^A-Za-z0-9_\s]")

# Longer digit runs are not a tenure and would not convert to int safely.
_MAX_YEAR_DIGITS = 4

_YEARS_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+)\+?\s*years?\s*(of)?\s*(experience|exp)", re.IGNORECASE | re.ASCII),
    re.compile(r"experience\s*[:\-]?\s*(\d+)\+?\s*years?", re.IGNORECASE | re.ASCII),
)

_CALENDAR_YEAR = re.compile(r"20\d{2}|19\d{2}")


def normalize_text(text: str) -> str:
    """Lowercase ``text`` and turn punctuation into whitespace."""
    return _PUNCTUATION.sub(" ", text.lower())


def matched_phrases(normalized: str, phrases: Iterable[str]) -> list[str]:
    """Return the phrases contained in already-normalized text, in rule order."""
    return [phrase for phrase in phrases if phrase in normalized]


def contains_any(normalized: str, phrases: Iterable[str]) -> bool:
    return any(phrase in normalized for phrase in phrases)


def count_matches(normalized: str, phrases: Iterable[str]) -> int:
    return len(matched_phrases(normalized, phrases))


def estimate_years_experience(text: str) -> int:
    """Estimate years of experience from free text.

    Explicit phrasing such as ``"12+ years of experience"`` or
    ``"Experience: 8 years"`` wins and the largest figure is used. Otherwise
    the spread between the earliest and latest calendar year mentioned is
    returned, which needs at least two year mentions.
    """

    years = 0
    for pattern in _YEARS_PATTERNS:
        for match in pattern.finditer(text):
            digits = match.group(1)
            if len(digits) > _MAX_YEAR_DIGITS:
                continue
            years = max(years, int(digits))

    if years == 0:
        mentioned = [int(value) for value in _CALENDAR_YEAR.findall(normalize_text(text))]
        if len(mentioned) >= 2:
            years = max(max(mentioned) - min(mentioned), 0)

    return years


@dataclass(frozen=True, slots=True)
class ResumeFacts:
    """Derived views of a resume shared by all signal evaluators."""

    raw: str
    normalized: str
    years_experience: int

    @classmethod
    def from_text(cls, text: str | None) -> "ResumeFacts":
        raw = text or ""
        return cls(
            raw=raw,
            normalized=normalize_text(raw),
            years_experience=estimate_years_experience(raw),
        )


__all__ = [
    "ResumeFacts",
    "contains_any",
    "count_matches",
    "estimate_years_experience",
    "matched_phrases",
    "normalize_text",
]
