from __future__ import annotations

from datetime import datetime
from typing import Iterator

import pendulum
import pytest
import structlog

from talentnetwork.container import TalentContainer, create_container
from talentnetwork.db import init_db
from talentnetwork.service import CandidateService


class TickingClock:
    """Returns a strictly increasing UTC timestamp on every call."""

    def __init__(self, start: datetime | None = None, step_seconds: int = 1):
        self._current = start or pendulum.datetime(2024, 1, 1, 9, 0, 0, tz="UTC")
        self._step = pendulum.duration(seconds=step_seconds)

    def __call__(self) -> datetime:
        value = self._current
        self._current = self._current + self._step
        return value


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def container(clock: TickingClock) -> Iterator[TalentContainer]:
    container = create_container(
        settings={"database": {"url": "sqlite://"}},
        now_provider=clock,
    )
    init_db(container.db_engine())
    yield container
    container.db_engine().dispose()


@pytest.fixture
def service(container: TalentContainer) -> CandidateService:
    return container.candidate_service()
