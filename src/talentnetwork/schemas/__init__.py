"\"\"\"Pydantic schema definitions for candidates, intake and configuration.\"\"\""

from __future__ import annotations

from .candidate import (
    AIAnalysis,
    CandidateCreate,
    CandidateRecord,
    CandidateStatus,
    DashboardStats,
    IntakeResponseCreate,
    IntakeResponseRecord,
    PipelineStage,
)
from .config import AppConfig, load_config

__all__ = [
    "AIAnalysis",
    "AppConfig",
    "CandidateCreate",
    "CandidateRecord",
    "CandidateStatus",
    "DashboardStats",
    "IntakeResponseCreate",
    "IntakeResponseRecord",
    "PipelineStage",
    "load_config",
]
