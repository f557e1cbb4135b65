"\"\"\"Candidate status and pipeline stage state machine.\"\"\""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable

import pendulum

from ..errors import ValidationFailed
from ..schemas import CandidateStatus, PipelineStage

PIPELINE_STAGES: tuple[tuple[PipelineStage, str], ...] = (
    (PipelineStage.NEW_SUBMISSIONS, "New Submissions"),
    (PipelineStage.UNDER_REVIEW, "Under Review"),
    (PipelineStage.QUALIFIED, "Qualified"),
    (PipelineStage.OUTREACH_SENT, "Outreach Sent"),
    (PipelineStage.IN_CONVERSATION, "In Conversation"),
    (PipelineStage.PLACED, "Placed"),
)

STATUS_LABELS: dict[CandidateStatus, str] = {
    status: status.value.replace("_", " ").title() for status in CandidateStatus
}

# Nominal progression; rejected is reachable from anything before placed.
STATUS_FLOW: tuple[CandidateStatus, ...] = (
    CandidateStatus.NEW,
    CandidateStatus.REVIEWING,
    CandidateStatus.QUALIFIED,
    CandidateStatus.CONTACTED,
    CandidateStatus.PLACED,
)


def stage_title(stage: PipelineStage) -> str:
    return dict(PIPELINE_STAGES)[stage]


def parse_status(value: Any) -> CandidateStatus:
    """Return the status enum member for ``value`` or raise ``ValidationFailed``."""
    try:
        return CandidateStatus(value)
    except (TypeError, ValueError):
        allowed = ", ".join(status.value for status in CandidateStatus)
        raise ValidationFailed.single(
            "status", f"Invalid status {value!r}; expected one of: {allowed}"
        ) from None


def parse_stage(value: Any) -> PipelineStage:
    """Return the pipeline stage member for ``value`` or raise ``ValidationFailed``."""
    try:
        return PipelineStage(value)
    except (TypeError, ValueError):
        allowed = ", ".join(stage.value for stage, _ in PIPELINE_STAGES)
        raise ValidationFailed.single(
            "pipeline_stage", f"Invalid pipeline stage {value!r}; expected one of: {allowed}"
        ) from None


def initial_state(qualified: bool) -> tuple[CandidateStatus, PipelineStage | None]:
    """Status and stage a new candidate starts in, given the screening verdict."""
    if qualified:
        return CandidateStatus.QUALIFIED, PipelineStage.NEW_SUBMISSIONS
    return CandidateStatus.REJECTED, None


def board_stage(candidate: Any) -> PipelineStage | None:
    """Column a candidate shows in on the board, or None when not in the pipeline."""
    if not candidate.qualified:
        return None
    return candidate.pipeline_stage or PipelineStage.NEW_SUBMISSIONS


def is_forward_status_move(current: CandidateStatus, target: CandidateStatus) -> bool:
    """Whether ``current -> target`` follows the nominal status progression."""
    if target is CandidateStatus.REJECTED:
        return current not in (CandidateStatus.PLACED, CandidateStatus.REJECTED)
    if current not in STATUS_FLOW or target not in STATUS_FLOW:
        return False
    return STATUS_FLOW.index(target) > STATUS_FLOW.index(current)


class PipelineStateMachine:
    """Validate and apply single-field status and stage transitions.

    Any stage may move to any other stage; the only structural rule is that
    candidates who were not qualified never enter the pipeline.
    """

    def __init__(self, *, now_provider: Callable[[], datetime] | None = None) -> None:
        self._now_provider = now_provider or (lambda: pendulum.now("UTC"))

    def now(self) -> datetime:
        return self._now_provider()

    def initial_state(self, qualified: bool) -> tuple[CandidateStatus, PipelineStage | None]:
        return initial_state(qualified)

    def apply_status(self, candidate: Any, status: Any) -> CandidateStatus:
        target = parse_status(status)
        candidate.status = target
        candidate.updated_at = self.now()
        return target

    def apply_stage(self, candidate: Any, stage: Any) -> PipelineStage:
        target = parse_stage(stage)
        if not candidate.qualified:
            raise ValidationFailed.single(
                "pipeline_stage", "Only qualified candidates can enter the pipeline"
            )
        candidate.pipeline_stage = target
        candidate.updated_at = self.now()
        return target


__all__ = [
    "PIPELINE_STAGES",
    "STATUS_FLOW",
    "STATUS_LABELS",
    "PipelineStateMachine",
    "board_stage",
    "initial_state",
    "is_forward_status_move",
    "parse_stage",
    "parse_status",
    "stage_title",
]
