from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from expense_tracker.application.services.token_service import ALGORITHM, JwtTokenService
from expense_tracker.domain.users.entities import User
from expense_tracker.shared.errors import InvalidTokenError

KEY = b"0123456789abcdef0123456789abcdef"
T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


class Clock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def _user(email: str = "alice@example.com") -> User:
    return User(
        id=1,
        email=email,
        password_hash="x",
        first_name="Alice",
        last_name="Smith",
        created_at=T0,
    )


@pytest.fixture()
def clock() -> Clock:
    return Clock(T0)


@pytest.fixture()
def service(clock: Clock) -> JwtTokenService:
    return JwtTokenService(key=KEY, ttl=timedelta(minutes=30), clock=clock)


def test_issue_embeds_subject_and_timestamps(service: JwtTokenService) -> None:
    token = service.issue(_user(), {"role": "user"})

    claims = jwt.decode(token, KEY, algorithms=[ALGORITHM], options={"verify_exp": False})
    assert claims["sub"] == "alice@example.com"
    assert claims["role"] == "user"
    assert claims["iat"] == int(T0.timestamp())
    assert claims["exp"] == int((T0 + timedelta(minutes=30)).timestamp())


def test_extra_claims_cannot_override_subject(service: JwtTokenService) -> None:
    token = service.issue(_user(), {"sub": "mallory@example.com"})

    assert service.extract_identity(token) == "alice@example.com"


def test_token_valid_right_after_issue(service: JwtTokenService) -> None:
    user = _user()
    assert service.is_valid(service.issue(user), user) is True


def test_token_invalid_once_ttl_elapsed(service: JwtTokenService, clock: Clock) -> None:
    user = _user()
    token = service.issue(user)

    clock.now = T0 + timedelta(minutes=29, seconds=59)
    assert service.is_valid(token, user) is True

    clock.now = T0 + timedelta(minutes=30)
    assert service.is_valid(token, user) is False


def test_expired_token_still_yields_identity(service: JwtTokenService, clock: Clock) -> None:
    token = service.issue(_user())
    clock.now = T0 + timedelta(days=2)

    assert service.extract_identity(token) == "alice@example.com"


def test_token_for_other_user_is_not_valid(service: JwtTokenService) -> None:
    token = service.issue(_user("alice@example.com"))

    assert service.is_valid(token, _user("bob@example.com")) is False


def test_token_signed_with_other_key_is_rejected(clock: Clock) -> None:
    forger = JwtTokenService(key=b"x" * 32, ttl=timedelta(minutes=30), clock=clock)
    service = JwtTokenService(key=KEY, ttl=timedelta(minutes=30), clock=clock)

    with pytest.raises(InvalidTokenError):
        service.extract_identity(forger.issue(_user()))


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_malformed_token_is_rejected(service: JwtTokenService, token: str) -> None:
    with pytest.raises(InvalidTokenError):
        service.extract_identity(token)


def test_empty_key_is_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenService(key=b"", ttl=timedelta(minutes=1))
