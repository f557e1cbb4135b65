"""Mock admin login modelled as an explicit session value."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import NotAuthenticated
from .intake import name_parts_from_email


@dataclass(frozen=True, slots=True)
class AdminSession:
    """Who is acting on the admin side; passed to every admin-only handler."""

    email: str | None = None
    name: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.email is not None


ANONYMOUS = AdminSession()


def login(email: str) -> AdminSession:
    """Accept any email address and derive a display name from it."""
    email = email.strip()
    if "@" not in email:
        raise NotAuthenticated(f"Not an email address: {email!r}")
    first, last = name_parts_from_email(email)
    name = " ".join(part for part in (first, last) if part) or email
    return AdminSession(email=email, name=name)


def logout(session: AdminSession) -> AdminSession:
    return ANONYMOUS


def require_admin(session: AdminSession | None) -> AdminSession:
    if session is None or not session.is_authenticated:
        raise NotAuthenticated()
    return session


__all__ = ["ANONYMOUS", "AdminSession", "login", "logout", "require_admin"]
