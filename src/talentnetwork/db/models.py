"""
Candidate and intake response tables.

A candidate is created once per intake submission, with the screening verdict
deciding its initial status and stage. Intake responses are append-only and
disappear with their candidate.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..schemas import CandidateStatus, PipelineStage
from .engine import Base


# ==================== Candidate Model ===================== #
class Candidate(Base):
    """Screened candidate and its current pipeline position."""

    __tablename__ = "candidates"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    first_name: Mapped[str | None] = mapped_column(String(100))
    last_name: Mapped[str | None] = mapped_column(String(100))

    resume_text: Mapped[str | None] = mapped_column(Text)
    resume_file_name: Mapped[str | None] = mapped_column(String(255))

    # Screening output
    ai_score: Mapped[int | None] = mapped_column(Integer)
    ai_analysis: Mapped[dict[str, Any] | None] = mapped_column(JSON)
    qualified: Mapped[bool | None] = mapped_column(Boolean)

    status: Mapped[CandidateStatus] = mapped_column(
        SQLEnum(
            CandidateStatus,
            native_enum=False,
            length=20,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=CandidateStatus.NEW,
        index=True,
    )
    pipeline_stage: Mapped[PipelineStage | None] = mapped_column(
        SQLEnum(
            PipelineStage,
            native_enum=False,
            length=20,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=True,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    intake_responses: Mapped[list["IntakeResponse"]] = relationship(
        back_populates="candidate",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="IntakeResponse.created_at",
    )

    def __repr__(self) -> str:
        return f"<Candidate {self.id} {self.email} status={self.status}>"


# ==================== IntakeResponse Model ===================== #
class IntakeResponse(Base):
    """One answer from the intake conversation."""

    __tablename__ = "intake_responses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    candidate_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("candidates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    question_key: Mapped[str] = mapped_column(String(50), nullable=False)
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    response: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    candidate: Mapped[Candidate] = relationship(back_populates="intake_responses")

    def __repr__(self) -> str:
        return f"<IntakeResponse {self.candidate_id} {self.question_key}>"
