from __future__ import annotations

import pytest

from talentnetwork.dashboard import Dashboard
from talentnetwork.errors import NotAuthenticated
from talentnetwork.schemas import PipelineStage
from talentnetwork.service import CandidateService
from talentnetwork.session import ANONYMOUS, login, logout


@pytest.fixture
def candidates(service: CandidateService):
    return [
        service.create_candidate(
            {
                "email": "sarah.chen@example.com",
                "first_name": "Sarah",
                "last_name": "Chen",
                "resume_text": "Chief Financial Officer, 12 years of experience",
            }
        ),
        service.create_candidate(
            {
                "email": "jamie.lee@example.com",
                "first_name": "Jamie",
                "last_name": "Lee",
                "resume_text": "Summer Intern, 2024",
            }
        ),
    ]


@pytest.mark.parametrize("session", [ANONYMOUS, None])
def test_dashboard_requires_admin_session(service: CandidateService, session):
    with pytest.raises(NotAuthenticated):
        Dashboard(service, session)


def test_dashboard_refuses_logged_out_session(service: CandidateService):
    with pytest.raises(NotAuthenticated):
        Dashboard(service, logout(login("rec@firm.com")))


def test_dashboard_search_and_stats(service: CandidateService, candidates):
    dashboard = Dashboard(service, login("rec@firm.com"))

    found = dashboard.search("chen")
    stats = dashboard.stats()

    assert [record.id for record in found] == [candidates[0].id]
    assert stats.total == 2
    assert stats.qualified == 1
    assert stats.by_stage[PipelineStage.NEW_SUBMISSIONS] == 1
