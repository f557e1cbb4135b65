"\"\"\"Resume screening engine.\"\"\""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..schemas import AIAnalysis
from .evaluators import AutoQualifierEvaluator, DisqualifierEvaluator, StrongSignalEvaluator
from .rules import ScreeningRules
from .text import ResumeFacts


@dataclass(slots=True)
class SignalEvaluation:
    """Normalized evaluator output kept for explanation."""

    method: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ScreeningResult:
    """Verdict, score and analysis for one resume."""

    qualified: bool
    score: int
    analysis: AIAnalysis
    evaluations: list[SignalEvaluation] = field(default_factory=list)

    @property
    def reasons(self) -> list[str]:
        return self.analysis.reasons

    def to_dict(self, *, include_signals: bool = False) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "qualified": self.qualified,
            "score": self.score,
            "reasons": list(self.analysis.reasons),
            "analysis": self.analysis.model_dump(mode="json", by_alias=True),
        }
        if include_signals:
            payload["signals"] = [
                {"method": item.method, "metadata": item.metadata} for item in self.evaluations
            ]
        return payload


class ScreeningEngine:
    """Deterministic keyword/heuristic resume classifier.

    Signal evaluators run in a fixed order: auto-qualifiers, strong signals,
    then disqualifiers. Sub-score floors from every evaluator are merged with a
    running maximum so the order of checks never lowers a score.
    """

    SUBSCORE_WEIGHTS: dict[str, int] = {
        "pe_exposure": 3,
        "seniority": 3,
        "functional_depth": 2,
        "culture_signals": 2,
    }

    SUBSCORE_MAX = 10

    def __init__(
        self,
        *,
        rules: ScreeningRules | None = None,
        auto_qualifiers: AutoQualifierEvaluator | None = None,
        strong_signals: StrongSignalEvaluator | None = None,
        disqualifiers: DisqualifierEvaluator | None = None,
    ) -> None:
        self._rules = rules or ScreeningRules()
        self._auto_qualifiers = auto_qualifiers or AutoQualifierEvaluator(config=self._rules)
        self._strong_signals = strong_signals or StrongSignalEvaluator(config=self._rules)
        self._disqualifiers = disqualifiers or DisqualifierEvaluator(config=self._rules)

    @property
    def rules(self) -> ScreeningRules:
        return self._rules

    def screen(self, resume_text: str | None) -> ScreeningResult:
        facts = ResumeFacts.from_text(resume_text)
        subscores = dict.fromkeys(self.SUBSCORE_WEIGHTS, 0)
        reasons: list[str] = []
        strengths: list[str] = []
        concerns: list[str] = []
        evaluations: list[SignalEvaluation] = []

        auto = self._auto_qualifiers.evaluate(facts)
        evaluations.append(self._normalize_evaluation(auto))
        self._merge(auto, subscores, reasons, strengths)
        qualified = bool(auto.get("qualifies"))

        strong = self._strong_signals.evaluate(facts)
        evaluations.append(self._normalize_evaluation(strong))
        self._merge(strong, subscores, reasons, strengths)
        signal_count = int(strong.get("signal_count", 0))
        if signal_count >= self._rules.qualifying_signal_count and not qualified:
            qualified = True
            reasons.append(f"{signal_count} strong qualifying signals")

        disqualifiers = self._disqualifiers.evaluate(facts)
        evaluations.append(self._normalize_evaluation(disqualifiers))
        concerns.extend(disqualifiers.get("concerns") or [])
        if disqualifiers.get("disqualifies"):
            qualified = False
            reasons = list(disqualifiers.get("override_reasons") or [])

        computed = self._weighted_score(subscores)

        if qualified:
            floor = self._rules.qualified_subscore_floor
            subscores = {name: max(value, floor) for name, value in subscores.items()}
            score = max(computed, self._rules.qualified_score_floor)
        else:
            score = min(computed, self._rules.rejected_score_ceiling)

        analysis = AIAnalysis(
            **{name: self._clamp(value) for name, value in subscores.items()},
            strengths=strengths,
            concerns=concerns,
            reasons=reasons,
        )
        return ScreeningResult(
            qualified=qualified,
            score=max(0, min(score, 100)),
            analysis=analysis,
            evaluations=evaluations,
        )

    def _weighted_score(self, subscores: dict[str, int]) -> int:
        return sum(
            min(subscores[name], self.SUBSCORE_MAX) * weight
            for name, weight in self.SUBSCORE_WEIGHTS.items()
        )

    @classmethod
    def _clamp(cls, value: int) -> int:
        return max(0, min(value, cls.SUBSCORE_MAX))

    @staticmethod
    def _merge(
        payload: dict[str, Any],
        subscores: dict[str, int],
        reasons: list[str],
        strengths: list[str],
    ) -> None:
        for name, floor in (payload.get("floors") or {}).items():
            if name not in subscores:
                raise ValueError(f"Unknown sub-score {name!r} from {payload.get('method')}")
            subscores[name] = max(subscores[name], int(floor))
        reasons.extend(payload.get("reasons") or [])
        strengths.extend(payload.get("strengths") or [])

    @staticmethod
    def _normalize_evaluation(payload: dict[str, Any]) -> SignalEvaluation:
        method = payload.get("method")
        if method is None:
            raise ValueError("Evaluator result must include 'method'.")
        return SignalEvaluation(method=str(method), metadata=dict(payload.get("metadata") or {}))


def screen_resume(resume_text: str | None) -> ScreeningResult:
    """Screen ``resume_text`` with the default rule table."""
    return ScreeningEngine().screen(resume_text)
