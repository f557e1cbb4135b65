"\"\"\"Candidate service: screening on intake, reads, and recruiter mutations.\"\"\""

from __future__ import annotations

import math
import uuid
from typing import Any, Mapping, TypeVar
from uuid import UUID

import structlog
from pydantic import BaseModel, ValidationError
from rapidfuzz import fuzz
from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from .core import PipelineStateMachine, ScreeningEngine, parse_stage, parse_status
from .core.states import PIPELINE_STAGES, board_stage
from .db import Candidate, IntakeResponse, session_scope
from .errors import CandidateNotFound, ValidationFailed
from .intake import QUESTION_KEYS
from .schemas import (
    CandidateCreate,
    CandidateRecord,
    CandidateStatus,
    DashboardStats,
    IntakeResponseCreate,
    IntakeResponseRecord,
    PipelineStage,
)

ModelT = TypeVar("ModelT", bound=BaseModel)

_OUT_OF_PIPELINE = (CandidateStatus.REJECTED, CandidateStatus.PLACED)


class CandidateService:
    """Collaborator-facing operations over candidate records.

    Every mutation touches a single candidate row inside one transaction;
    concurrent edits resolve as last writer wins.
    """

    def __init__(
        self,
        *,
        engine: ScreeningEngine,
        session_factory: sessionmaker[Session],
        state_machine: PipelineStateMachine | None = None,
        search_min_similarity: float = 80.0,
    ) -> None:
        self._engine = engine
        self._sessions = session_factory
        self._states = state_machine or PipelineStateMachine()
        self._search_min_similarity = search_min_similarity
        self._logger = structlog.get_logger(__name__)

    # ------------------------------------------------------------------ create

    def create_candidate(self, payload: CandidateCreate | Mapping[str, Any]) -> CandidateRecord:
        data = _validate(CandidateCreate, payload)
        result = self._engine.screen(data.resume_text)
        status, stage = self._states.initial_state(result.qualified)
        now = self._states.now()

        row = Candidate(
            id=uuid.uuid4(),
            email=str(data.email),
            first_name=data.first_name,
            last_name=data.last_name,
            resume_text=data.resume_text,
            resume_file_name=data.resume_file_name,
            ai_score=result.score,
            ai_analysis=result.analysis.model_dump(mode="json", by_alias=True),
            qualified=result.qualified,
            status=status,
            pipeline_stage=stage,
            created_at=now,
            updated_at=now,
        )
        with session_scope(self._sessions) as session:
            session.add(row)

        self._logger.info(
            "candidate.created",
            candidate_id=str(row.id),
            qualified=result.qualified,
            score=result.score,
            status=status.value,
            pipeline_stage=stage.value if stage else None,
        )
        return CandidateRecord.model_validate(row)

    # ------------------------------------------------------------------- reads

    def get_candidate(self, candidate_id: UUID | str) -> CandidateRecord:
        key = _parse_id(candidate_id)
        with session_scope(self._sessions) as session:
            row = _load(session, key)
            return CandidateRecord.model_validate(row)

    def list_candidates(self) -> list[CandidateRecord]:
        """All candidates, newest first."""
        stmt = select(Candidate).order_by(Candidate.created_at.desc())
        with session_scope(self._sessions) as session:
            return [CandidateRecord.model_validate(row) for row in session.scalars(stmt)]

    def list_candidates_by_stage(self, stage: PipelineStage | str) -> list[CandidateRecord]:
        target = parse_stage(stage)
        stmt = (
            select(Candidate)
            .where(Candidate.pipeline_stage == target)
            .order_by(Candidate.created_at.desc())
        )
        with session_scope(self._sessions) as session:
            return [CandidateRecord.model_validate(row) for row in session.scalars(stmt)]

    # --------------------------------------------------------------- mutations

    def update_status(
        self, candidate_id: UUID | str, status: CandidateStatus | str
    ) -> CandidateRecord:
        key = _parse_id(candidate_id)
        target = parse_status(status)
        with session_scope(self._sessions) as session:
            row = _load(session, key)
            previous = row.status
            self._states.apply_status(row, target)

        self._logger.info(
            "candidate.status_updated",
            candidate_id=str(key),
            previous=_value(previous),
            status=target.value,
        )
        return CandidateRecord.model_validate(row)

    def update_pipeline_stage(
        self, candidate_id: UUID | str, stage: PipelineStage | str
    ) -> CandidateRecord:
        key = _parse_id(candidate_id)
        target = parse_stage(stage)
        with session_scope(self._sessions) as session:
            row = _load(session, key)
            previous = row.pipeline_stage
            self._states.apply_stage(row, target)

        self._logger.info(
            "candidate.stage_updated",
            candidate_id=str(key),
            previous=_value(previous),
            pipeline_stage=target.value,
        )
        return CandidateRecord.model_validate(row)

    def rescreen_candidate(self, candidate_id: UUID | str) -> CandidateRecord:
        """Recompute score and analysis from the stored resume text.

        The analysis is replaced wholesale. A candidate who no longer qualifies
        leaves the pipeline; one who newly qualifies enters it at the first stage.
        Candidates already on the board keep their column.
        """

        key = _parse_id(candidate_id)
        with session_scope(self._sessions) as session:
            row = _load(session, key)
            result = self._engine.screen(row.resume_text or "")
            row.ai_score = result.score
            row.ai_analysis = result.analysis.model_dump(mode="json", by_alias=True)
            row.qualified = result.qualified
            if not result.qualified or row.pipeline_stage is None:
                row.status, row.pipeline_stage = self._states.initial_state(result.qualified)
            row.updated_at = self._states.now()

        self._logger.info(
            "candidate.rescreened",
            candidate_id=str(key),
            qualified=result.qualified,
            score=result.score,
        )
        return CandidateRecord.model_validate(row)

    # ------------------------------------------------------------------ intake

    def record_intake_response(
        self, payload: IntakeResponseCreate | Mapping[str, Any]
    ) -> IntakeResponseRecord:
        data = _validate(IntakeResponseCreate, payload)
        if data.question_key not in QUESTION_KEYS:
            raise ValidationFailed.single(
                "question_key", f"Unknown intake question {data.question_key!r}"
            )

        with session_scope(self._sessions) as session:
            _load(session, data.candidate_id)
            row = IntakeResponse(
                id=uuid.uuid4(),
                candidate_id=data.candidate_id,
                question_key=data.question_key,
                question_text=data.question_text,
                response=data.response,
                created_at=self._states.now(),
            )
            session.add(row)

        self._logger.info(
            "intake.response_recorded",
            candidate_id=str(data.candidate_id),
            question_key=data.question_key,
        )
        return IntakeResponseRecord.model_validate(row)

    def list_intake_responses(self, candidate_id: UUID | str) -> list[IntakeResponseRecord]:
        """Responses for one candidate in the order they were given."""
        key = _parse_id(candidate_id)
        stmt = (
            select(IntakeResponse)
            .where(IntakeResponse.candidate_id == key)
            .order_by(IntakeResponse.created_at.asc())
        )
        with session_scope(self._sessions) as session:
            _load(session, key)
            return [IntakeResponseRecord.model_validate(row) for row in session.scalars(stmt)]

    # --------------------------------------------------------------- dashboard

    def search_candidates(self, query: str) -> list[CandidateRecord]:
        """Match names and email by substring, falling back to fuzzy similarity."""
        candidates = self.list_candidates()
        needle = query.strip().lower()
        if not needle:
            return candidates
        return [
            candidate
            for candidate in candidates
            if self._matches(needle, (candidate.first_name, candidate.last_name, candidate.email))
        ]

    def dashboard_stats(self) -> DashboardStats:
        candidates = self.list_candidates()
        total = len(candidates)
        by_stage = dict.fromkeys((stage for stage, _ in PIPELINE_STAGES), 0)
        for candidate in candidates:
            stage = board_stage(candidate)
            if stage is not None:
                by_stage[stage] += 1

        avg_score = 0
        if total:
            mean = sum(candidate.ai_score or 0 for candidate in candidates) / total
            avg_score = math.floor(mean + 0.5)

        return DashboardStats(
            total=total,
            qualified=sum(1 for candidate in candidates if candidate.qualified),
            in_pipeline=sum(
                1 for candidate in candidates if candidate.status not in _OUT_OF_PIPELINE
            ),
            avg_score=avg_score,
            by_stage=by_stage,
        )

    def _matches(self, needle: str, values: tuple[str | None, ...]) -> bool:
        haystack = [value.lower() for value in values if value]
        if any(needle in value for value in haystack):
            return True
        return any(
            fuzz.partial_ratio(needle, value) >= self._search_min_similarity for value in haystack
        )


def _validate(model: type[ModelT], payload: Any) -> ModelT:
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailed.from_pydantic(exc) from exc


def _parse_id(candidate_id: UUID | str) -> UUID:
    if isinstance(candidate_id, UUID):
        return candidate_id
    try:
        return UUID(str(candidate_id))
    except ValueError:
        raise ValidationFailed.single("id", f"Invalid candidate id {candidate_id!r}") from None


def _load(session: Session, candidate_id: UUID) -> Candidate:
    row = session.get(Candidate, candidate_id)
    if row is None:
        raise CandidateNotFound(candidate_id)
    return row


def _value(member: Any) -> Any:
    return getattr(member, "value", member)


__all__ = ["CandidateService"]
