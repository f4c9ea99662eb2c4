# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from expense_tracker.domain.users.entities import AuthResult, User
from expense_tracker.domain.users.exceptions import InvalidCredentialsError, UserNotFoundError
from expense_tracker.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from expense_tracker.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def _authenticate(self, email: str, password: str) -> None:
        user = self._users.find_by_email(email)
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            logger.warning(f"auth.login: bad credentials email={email}")
            raise InvalidCredentialsError()

    def _load_user(self, email: str) -> User:
        user = self._users.find_by_email(email)
        if user is None:
            # authenticated a moment ago, so the row vanished in between
            logger.error(f"auth.login: user not found email={email}")
            raise UserNotFoundError()
        return user

    def execute(self, email: str, password: str) -> AuthResult:
        logger.info(f"auth.login: attempt email={email}")
        self._authenticate(email, password)
        user = self._load_user(email)
        logger.info(f"auth.login: ok user_id={user.id}")
        return AuthResult.for_user(user, self._tokens.issue(user))
