"""Persistence layer."""

from .engine import Base, create_db_engine, create_session_factory, init_db, session_scope
from .models import Candidate, IntakeResponse

__all__ = [
    "Base",
    "Candidate",
    "IntakeResponse",
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "session_scope",
]
