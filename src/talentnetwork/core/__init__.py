"\"\"\"Core screening engine and pipeline state machine.\"\"\""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

# NOTE: keep imports explicit for export clarity.
from .rules import ScreeningRules
from .screening import ScreeningEngine, ScreeningResult, SignalEvaluation, screen_resume
from .states import (
    PIPELINE_STAGES,
    PipelineStateMachine,
    initial_state,
    parse_stage,
    parse_status,
)
from .text import ResumeFacts
from .evaluators import AutoQualifierEvaluator, DisqualifierEvaluator, StrongSignalEvaluator


@runtime_checkable
class SignalEvaluator(Protocol):
    """Evaluator contract for computing screening signals."""

    method: str

    def evaluate(self, facts: ResumeFacts) -> dict[str, Any]:
        """Return signal results for the given resume facts."""


__all__ = [
    "PIPELINE_STAGES",
    "AutoQualifierEvaluator",
    "DisqualifierEvaluator",
    "PipelineStateMachine",
    "ResumeFacts",
    "ScreeningEngine",
    "ScreeningResult",
    "ScreeningRules",
    "SignalEvaluation",
    "SignalEvaluator",
    "StrongSignalEvaluator",
    "initial_state",
    "parse_stage",
    "parse_status",
    "screen_resume",
]
