# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    email: str
    password_hash: str
    first_name: str
    last_name: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class AuthResult:
    """Token bundle returned by registration and login."""

    token: str
    email: str
    first_name: str
    last_name: str

    @classmethod
    def for_user(cls, user: User, token: str) -> AuthResult:
        return cls(
            token=token,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
        )
