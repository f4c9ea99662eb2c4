from __future__ import annotations

from datetime import timedelta

import pytest
from fakes import DeterministicHasher, InMemoryUserRepository

from expense_tracker.application.services.token_service import JwtTokenService
from expense_tracker.application.use_cases.users.login_user import LoginUserUseCase
from expense_tracker.application.use_cases.users.register_user import RegisterUserUseCase
from expense_tracker.domain.users.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

KEY = b"k" * 32


class _DisappearingUserRepository(InMemoryUserRepository):
    """Answers the credential check, then loses the row."""

    def __init__(self) -> None:
        super().__init__()
        self._lookups = 0

    def find_by_email(self, email: str):
        self._lookups += 1
        if self._lookups > 1:
            return None
        return super().find_by_email(email)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(key=KEY, ttl=timedelta(hours=1))


def _register(users, tokens) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


def _login(users, tokens) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


def test_register_user_success(users, tokens) -> None:
    result = _register(users, tokens).execute("Alice", "Smith", "alice@example.com", "secret123")

    assert result.email == "alice@example.com"
    assert (result.first_name, result.last_name) == ("Alice", "Smith")
    assert tokens.extract_identity(result.token) == "alice@example.com"

    stored = users.find_by_email("alice@example.com")
    assert stored is not None
    assert stored.password_hash == "hashed:secret123"


def test_register_user_duplicate_raises(users, tokens) -> None:
    use_case = _register(users, tokens)
    use_case.execute("Alice", "Smith", "alice@example.com", "secret123")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        use_case.execute("Other", "Person", "alice@example.com", "other-pass")

    assert exc_info.value.status == 409


def test_login_user_success(users, tokens) -> None:
    _register(users, tokens).execute("Alice", "Smith", "alice@example.com", "secret123")

    result = _login(users, tokens).execute("alice@example.com", "secret123")

    assert result.email == "alice@example.com"
    assert result.first_name == "Alice"
    assert tokens.extract_identity(result.token) == "alice@example.com"


def test_login_user_invalid_password(users, tokens) -> None:
    _register(users, tokens).execute("Alice", "Smith", "alice@example.com", "secret123")

    with pytest.raises(InvalidCredentialsError):
        _login(users, tokens).execute("alice@example.com", "wrong")


def test_login_unknown_email_is_invalid_credentials(users, tokens) -> None:
    with pytest.raises(InvalidCredentialsError):
        _login(users, tokens).execute("nobody@example.com", "secret123")


def test_login_user_vanishing_after_authentication(tokens) -> None:
    users = _DisappearingUserRepository()
    _register(users, tokens).execute("Alice", "Smith", "alice@example.com", "secret123")
    users._lookups = 0

    with pytest.raises(UserNotFoundError):
        _login(users, tokens).execute("alice@example.com", "secret123")
