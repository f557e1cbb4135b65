"""Error types surfaced to callers of the candidate service."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable
from uuid import UUID


class TalentNetworkError(Exception):
    """Base class for recoverable talent network errors."""


@dataclass(frozen=True, slots=True)
class FieldError:
    """A single field-level validation problem."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class ValidationFailed(TalentNetworkError, ValueError):
    """Raised when caller input is rejected before reaching the core."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors = list(errors)
        super().__init__("Validation failed")

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationFailed":
        return cls([FieldError(field=field, message=message)])

    @classmethod
    def from_pydantic(cls, exc: Any) -> "ValidationFailed":
        """Translate a pydantic ``ValidationError`` into field errors."""
        errors = [
            FieldError(
                field=".".join(_snake(part) for part in item.get("loc", ())) or "__root__",
                message=item.get("msg", "invalid value"),
            )
            for item in exc.errors()
        ]
        return cls(errors)

    def fields(self) -> list[str]:
        return [error.field for error in self.errors]

    def __str__(self) -> str:
        details = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        return f"Validation failed: {details}"


def _snake(part: object) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", str(part)).lower()


class CandidateNotFound(TalentNetworkError, LookupError):
    """Raised when an operation references an unknown candidate id."""

    def __init__(self, candidate_id: UUID | str):
        self.candidate_id = str(candidate_id)
        super().__init__(f"Candidate not found: {self.candidate_id}")


class NotAuthenticated(TalentNetworkError, PermissionError):
    """Raised when an admin-only handler runs without a logged-in session."""

    def __init__(self, message: str = "Admin login required"):
        super().__init__(message)


__all__ = [
    "CandidateNotFound",
    "FieldError",
    "NotAuthenticated",
    "TalentNetworkError",
    "ValidationFailed",
]
