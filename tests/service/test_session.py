from __future__ import annotations

import pytest

from talentnetwork.errors import NotAuthenticated
from talentnetwork.session import ANONYMOUS, login, logout, require_admin


def test_login_derives_display_name():
    session = login("jane.doe@firm.com")

    assert session.is_authenticated
    assert session.email == "jane.doe@firm.com"
    assert session.name == "Jane Doe"
    assert require_admin(session) is session


def test_login_requires_an_email_address():
    with pytest.raises(NotAuthenticated):
        login("jane")


def test_logout_returns_anonymous_session():
    session = logout(login("jane@firm.com"))

    assert session is ANONYMOUS
    with pytest.raises(NotAuthenticated):
        require_admin(session)
    with pytest.raises(NotAuthenticated):
        require_admin(None)
