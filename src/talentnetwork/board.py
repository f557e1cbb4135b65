"\"\"\"Kanban board view with optimistic stage moves.\"\"\""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

import structlog

from .core.states import PIPELINE_STAGES, board_stage, parse_stage
from .errors import CandidateNotFound, TalentNetworkError
from .schemas import CandidateRecord, PipelineStage
from .session import AdminSession, require_admin

if TYPE_CHECKING:
    from .service import CandidateService


@dataclass(slots=True)
class MoveResult:
    """Outcome of a drag-and-drop move after reconciliation."""

    candidate_id: UUID
    previous_stage: PipelineStage | None
    requested_stage: PipelineStage
    stage: PipelineStage | None
    committed: bool
    error: TalentNetworkError | None = None

    @property
    def changed(self) -> bool:
        return self.committed and self.stage != self.previous_stage

    @property
    def rolled_back(self) -> bool:
        return self.error is not None


class PipelineBoard:
    """Qualified candidates grouped into pipeline columns.

    A move is applied to the local view first, then sent to the service. The
    returned record becomes the confirmed state; if the mutation fails the card
    goes back to the last confirmed column.
    """

    def __init__(self, service: "CandidateService", session: AdminSession) -> None:
        self._session = require_admin(session)
        self._service = service
        self._confirmed: dict[UUID, CandidateRecord] = {}
        self._local: dict[UUID, PipelineStage] = {}
        self._order: list[UUID] = []
        self._logger = structlog.get_logger(__name__).bind(admin=session.email)
        self.refresh()

    def refresh(self) -> None:
        """Reload confirmed state from the service, dropping local edits."""
        self._confirmed.clear()
        self._local.clear()
        self._order.clear()
        for record in self._service.list_candidates():
            stage = board_stage(record)
            if stage is None:
                continue
            self._confirmed[record.id] = record
            self._local[record.id] = stage
            self._order.append(record.id)

    def stage_of(self, candidate_id: UUID | str) -> PipelineStage:
        return self._local[self._card_id(candidate_id)]

    def columns(self) -> dict[PipelineStage, list[CandidateRecord]]:
        grouped: dict[PipelineStage, list[CandidateRecord]] = {
            stage: [] for stage, _ in PIPELINE_STAGES
        }
        for card_id in self._order:
            grouped[self._local[card_id]].append(self._confirmed[card_id])
        return grouped

    def move(self, candidate_id: UUID | str, target: PipelineStage | str) -> MoveResult:
        card_id = self._card_id(candidate_id)
        target_stage = parse_stage(target)
        confirmed = board_stage(self._confirmed[card_id])

        if self._local[card_id] == target_stage:
            return MoveResult(
                candidate_id=card_id,
                previous_stage=confirmed,
                requested_stage=target_stage,
                stage=confirmed,
                committed=True,
            )

        self._local[card_id] = target_stage
        try:
            record = self._service.update_pipeline_stage(card_id, target_stage)
        except TalentNetworkError as exc:
            self._local[card_id] = confirmed
            self._logger.warning(
                "board.move_rolled_back",
                candidate_id=str(card_id),
                requested_stage=target_stage.value,
                restored_stage=confirmed.value if confirmed else None,
                error=str(exc),
            )
            return MoveResult(
                candidate_id=card_id,
                previous_stage=confirmed,
                requested_stage=target_stage,
                stage=confirmed,
                committed=False,
                error=exc,
            )
        except Exception:
            self._local[card_id] = confirmed
            self._logger.exception(
                "board.move_rolled_back",
                candidate_id=str(card_id),
                requested_stage=target_stage.value,
                restored_stage=confirmed.value if confirmed else None,
            )
            raise

        self._confirmed[card_id] = record
        self._local[card_id] = board_stage(record) or target_stage
        self._logger.info(
            "board.move_committed",
            candidate_id=str(card_id),
            previous_stage=confirmed.value if confirmed else None,
            pipeline_stage=self._local[card_id].value,
        )
        return MoveResult(
            candidate_id=card_id,
            previous_stage=confirmed,
            requested_stage=target_stage,
            stage=self._local[card_id],
            committed=True,
        )

    def _card_id(self, candidate_id: UUID | str) -> UUID:
        try:
            key = candidate_id if isinstance(candidate_id, UUID) else UUID(str(candidate_id))
        except ValueError:
            raise CandidateNotFound(candidate_id) from None
        if key not in self._local:
            raise CandidateNotFound(key)
        return key


__all__ = ["MoveResult", "PipelineBoard"]
