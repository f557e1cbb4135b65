"""Admin dashboard: candidate search and pipeline statistics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from .schemas import CandidateRecord, DashboardStats
from .session import AdminSession, require_admin

if TYPE_CHECKING:
    from .service import CandidateService


class Dashboard:
    """Read-only admin views over the candidate service.

    Like the board, it is built from an explicit admin session and refuses an
    anonymous one.
    """

    def __init__(self, service: "CandidateService", session: AdminSession) -> None:
        self._session = require_admin(session)
        self._service = service
        self._logger = structlog.get_logger(__name__).bind(admin=session.email)

    def search(self, query: str) -> list[CandidateRecord]:
        records = self._service.search_candidates(query)
        self._logger.debug("dashboard.search", query=query, matches=len(records))
        return records

    def stats(self) -> DashboardStats:
        return self._service.dashboard_stats()


__all__ = ["Dashboard"]
