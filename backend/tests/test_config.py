from __future__ import annotations

import pydantic
import pytest

from users_service.core.config import Settings


def test_session_expiry_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("USER_SESSION_EXPIRY_HOURS", "12")

    assert Settings().user_session_expiry_hours == 12


def test_allowed_origins_accepts_comma_separated(monkeypatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.example, http://b.example")

    assert Settings().allowed_origins == ["http://a.example", "http://b.example"]


def test_session_expiry_defaults_to_two_hours(monkeypatch) -> None:
    monkeypatch.delenv("USER_SESSION_EXPIRY_HOURS", raising=False)

    assert Settings(_env_file=None).user_session_expiry_hours == 2


def test_negative_session_expiry_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("USER_SESSION_EXPIRY_HOURS", "-1")

    with pytest.raises(pydantic.ValidationError):
        Settings()


def test_default_origins_are_explicit(monkeypatch) -> None:
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)

    origins = Settings(_env_file=None).allowed_origins

    assert origins
    assert "*" not in origins
    assert all(origin.startswith(("http://", "https://")) for origin in origins)
