from __future__ import annotations

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


class CandidateStatus(str, Enum):
    """Recruiter-facing status of a candidate."""

    NEW = "new"
    REVIEWING = "reviewing"
    QUALIFIED = "qualified"
    CONTACTED = "contacted"
    REJECTED = "rejected"
    PLACED = "placed"


class PipelineStage(str, Enum):
    """Kanban column a qualified candidate occupies."""

    NEW_SUBMISSIONS = "new_submissions"
    UNDER_REVIEW = "under_review"
    QUALIFIED = "qualified"
    OUTREACH_SENT = "outreach_sent"
    IN_CONVERSATION = "in_conversation"
    PLACED = "placed"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class AIAnalysis(_CamelModel):
    """Structured screening analysis stored with a candidate."""

    pe_exposure: int = Field(0, ge=0, le=10)
    seniority: int = Field(0, ge=0, le=10)
    functional_depth: int = Field(0, ge=0, le=10)
    culture_signals: int = Field(0, ge=0, le=10)
    strengths: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)
    reasons: list[str] = Field(default_factory=list)


class CandidateCreate(_CamelModel):
    """Public intake submission."""

    email: EmailStr
    first_name: str | None = None
    last_name: str | None = None
    resume_text: str = Field(..., min_length=1)
    resume_file_name: str | None = None

    @field_validator("resume_text")
    @classmethod
    def _resume_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Resume text is required")
        return value

    @field_validator("first_name", "last_name", "resume_file_name")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None


class CandidateRecord(_CamelModel):
    """Candidate as returned to collaborators."""

    id: UUID
    email: str
    first_name: str | None = None
    last_name: str | None = None
    resume_text: str | None = None
    resume_file_name: str | None = None
    ai_score: int | None = Field(None, ge=0, le=100)
    ai_analysis: AIAnalysis | None = None
    qualified: bool | None = None
    status: CandidateStatus = CandidateStatus.NEW
    pipeline_stage: PipelineStage | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)

    @property
    def display_name(self) -> str:
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) if parts else self.email


class IntakeResponseCreate(_CamelModel):
    """One answer in the intake conversation."""

    candidate_id: UUID
    question_key: str = Field(..., min_length=1)
    question_text: str = Field(..., min_length=1)
    response: str


class IntakeResponseRecord(_CamelModel):
    """Stored intake answer."""

    id: UUID
    candidate_id: UUID
    question_key: str
    question_text: str
    response: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class DashboardStats(_CamelModel):
    """Aggregate numbers for the admin dashboard."""

    total: int = 0
    qualified: int = 0
    in_pipeline: int = 0
    avg_score: int = 0
    by_stage: dict[PipelineStage, int] = Field(default_factory=dict)
