# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from expense_tracker.domain.users.entities import AuthResult, User
from expense_tracker.domain.users.exceptions import UserAlreadyExistsError
from expense_tracker.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from expense_tracker.shared.logging import logger


class RegisterUserUseCase:
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

    def execute(self, first_name: str, last_name: str, email: str, password: str) -> AuthResult:
        logger.info(f"auth.register: attempt email={email}")
        if self._users.exists_by_email(email):
            logger.warning(f"auth.register: duplicate email={email}")
            raise UserAlreadyExistsError(f"Email already exists: {email}")

        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            email=email,
            password_hash=hashed,
            first_name=first_name,
            last_name=last_name,
            created_at=datetime.now(UTC),
        )
        persisted = self._users.add(user)
        logger.info(f"auth.register: ok user_id={persisted.id}")

        return AuthResult.for_user(persisted, self._tokens.issue(persisted))
