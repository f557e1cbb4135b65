"""Intake conversation: fixed question set and the driver that records answers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from .errors import ValidationFailed
from .schemas import IntakeResponseRecord

if TYPE_CHECKING:
    from .service import CandidateService


@dataclass(frozen=True, slots=True)
class IntakeQuestion:
    key: str
    text: str


INTAKE_QUESTIONS: tuple[IntakeQuestion, ...] = (
    IntakeQuestion(
        "current_situation",
        "What's your current role, and what's prompting you to explore new opportunities?",
    ),
    IntakeQuestion(
        "pe_exposure",
        "Have you worked directly with private equity firms before, either at a fund or "
        "within a portfolio company? Tell me about that experience.",
    ),
    IntakeQuestion(
        "value_creation",
        "When you step into a new organization, how do you typically approach the first "
        "100 days? What do you prioritize?",
    ),
    IntakeQuestion(
        "functional_expertise",
        "What would you say is your core functional superpower? Where do you create the "
        "most impact?",
    ),
    IntakeQuestion(
        "ideal_role",
        "Describe your ideal next role. What would make you excited to get out of bed "
        "every day?",
    ),
    IntakeQuestion(
        "fund_preferences",
        "Are there specific fund sizes, industries, or investment stages you're most "
        "drawn to?",
    ),
    IntakeQuestion(
        "geography",
        "What's your geographic flexibility? Open to relocation, or does location matter?",
    ),
    IntakeQuestion(
        "compensation",
        "To make sure we're aligned on expectations, what's your target total "
        "compensation range?",
    ),
    IntakeQuestion(
        "timeline",
        "How soon are you realistically looking to make a move?",
    ),
    IntakeQuestion(
        "anything_else",
        "Is there anything else you'd like us to know that would help us find the right "
        "fit for you?",
    ),
)

QUESTION_KEYS: frozenset[str] = frozenset(question.key for question in INTAKE_QUESTIONS)

COMPLETION_MESSAGE = (
    "That's everything I need for now. Our team will review your profile and reach out "
    "when we have opportunities that match. Thanks for joining the Taurean network."
)


def initial_message(first_name: str | None = None) -> str:
    """Greeting shown before the first question."""
    greeting = f", {first_name}" if first_name else ""
    return (
        f"Thanks for taking the time{greeting}. I'm going to ask you a few questions to "
        "better understand your background and what you're looking for. This helps us "
        "match you with the right opportunities. Ready to begin?"
    )


def name_parts_from_email(email: str) -> tuple[str | None, str | None]:
    """Guess ``(first_name, last_name)`` from an email local part.

    ``"sarah.chen@x.com"`` gives ``("Sarah", "Chen")``; a single token gives a
    first name only.
    """

    local_part = email.split("@", 1)[0]
    parts = [part.capitalize() for part in re.split(r"[._ ]", local_part) if part]
    if len(parts) >= 2:
        return parts[0], " ".join(parts[1:])
    if len(parts) == 1:
        return parts[0], None
    return None, None


class IntakeConversation:
    """Ask the fixed questions strictly in order and persist each answer."""

    def __init__(
        self,
        service: "CandidateService",
        candidate_id: UUID | str,
        *,
        answered: int = 0,
        first_name: str | None = None,
    ) -> None:
        if not 0 <= answered <= len(INTAKE_QUESTIONS):
            raise ValueError(f"answered must be between 0 and {len(INTAKE_QUESTIONS)}")
        self._service = service
        self._candidate_id = candidate_id
        self._index = answered
        self._first_name = first_name

    @classmethod
    def resume(cls, service: "CandidateService", candidate_id: UUID | str) -> "IntakeConversation":
        """Continue a conversation after the answers already stored.

        Raises ``ValidationFailed`` for candidates screening did not qualify.
        """

        candidate = service.get_candidate(candidate_id)
        if not candidate.qualified:
            raise ValidationFailed.single(
                "qualified", "Only qualified candidates are invited to the intake conversation"
            )
        stored = service.list_intake_responses(candidate.id)
        answered_keys = {item.question_key for item in stored}
        answered = 0
        for question in INTAKE_QUESTIONS:
            if question.key not in answered_keys:
                break
            answered += 1
        return cls(service, candidate.id, answered=answered, first_name=candidate.first_name)

    @property
    def is_complete(self) -> bool:
        return self._index >= len(INTAKE_QUESTIONS)

    @property
    def answered(self) -> int:
        return self._index

    @property
    def current_question(self) -> IntakeQuestion | None:
        if self.is_complete:
            return None
        return INTAKE_QUESTIONS[self._index]

    def greeting(self) -> str:
        return initial_message(self._first_name)

    def answer(self, response: str) -> tuple[IntakeResponseRecord, str]:
        """Record ``response`` to the current question.

        Returns the stored row and the next message to show, which is either the
        next question or the completion message.
        """

        question = self.current_question
        if question is None:
            raise RuntimeError("Intake conversation is already complete")

        record = self._service.record_intake_response(
            {
                "candidate_id": self._candidate_id,
                "question_key": question.key,
                "question_text": question.text,
                "response": response,
            }
        )
        self._index += 1
        next_question = self.current_question
        return record, next_question.text if next_question else COMPLETION_MESSAGE


__all__ = [
    "COMPLETION_MESSAGE",
    "INTAKE_QUESTIONS",
    "QUESTION_KEYS",
    "IntakeConversation",
    "IntakeQuestion",
    "initial_message",
    "name_parts_from_email",
]
