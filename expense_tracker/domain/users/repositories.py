# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, Protocol

from .entities import User


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def exists_by_email(self, email: str) -> bool: ...
    def add(self, user: User) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, identity: User, extra_claims: dict[str, Any] | None = None) -> str: ...
