"\"\"\"Dependency injection container for the talent network.\"\"\""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable

from dependency_injector import containers, providers

from .core import (
    AutoQualifierEvaluator,
    DisqualifierEvaluator,
    PipelineStateMachine,
    ScreeningEngine,
    ScreeningRules,
    StrongSignalEvaluator,
)
from .db import create_db_engine, create_session_factory
from .schemas import AppConfig, load_config
from .service import CandidateService


class TalentContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    screening_rules = providers.Singleton(ScreeningRules.from_settings, config.screening)

    auto_qualifiers = providers.Singleton(AutoQualifierEvaluator, config=screening_rules)
    strong_signals = providers.Singleton(StrongSignalEvaluator, config=screening_rules)
    disqualifiers = providers.Singleton(DisqualifierEvaluator, config=screening_rules)

    screening_engine = providers.Singleton(
        ScreeningEngine,
        rules=screening_rules,
        auto_qualifiers=auto_qualifiers,
        strong_signals=strong_signals,
        disqualifiers=disqualifiers,
    )

    now_provider = providers.Object(None)
    state_machine = providers.Singleton(PipelineStateMachine, now_provider=now_provider)

    db_engine = providers.Singleton(
        create_db_engine,
        config.database.url,
        echo=config.database.echo,
    )
    session_factory = providers.Singleton(create_session_factory, db_engine)

    candidate_service = providers.Factory(
        CandidateService,
        engine=screening_engine,
        session_factory=session_factory,
        state_machine=state_machine,
        search_min_similarity=config.search.min_similarity,
    )


def create_container(
    *,
    settings: AppConfig | dict[str, Any] | None = None,
    now_provider: Callable[[], datetime] | None = None,
) -> TalentContainer:
    """Instantiate container with optional overrides."""

    app_config = settings if isinstance(settings, AppConfig) else load_config(settings or {})

    container = TalentContainer()
    container.config.from_dict(app_config.to_settings())

    if now_provider is not None:
        container.now_provider.override(providers.Object(now_provider))

    return container


__all__ = ["TalentContainer", "create_container"]
