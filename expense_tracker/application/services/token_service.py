# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-bounded bearer tokens (JWT, HS256)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from expense_tracker.domain.users.entities import User
from expense_tracker.shared.errors import InvalidTokenError
from expense_tracker.shared.logging import logger

ALGORITHM = "HS256"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService:
    """Issues and checks JWTs whose subject is the user's email.

    The same key signs and verifies. Tokens are never stored, so expiry is
    the only way a token stops being accepted.
    """

    def __init__(
        self,
        *,
        key: bytes,
        ttl: timedelta,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not key:
            raise ValueError("signing key must not be empty")
        self._key = key
        self._ttl = ttl
        self._clock = clock

    def issue(self, identity: User, extra_claims: dict[str, Any] | None = None) -> str:
        now = self._clock()
        claims: dict[str, Any] = dict(extra_claims or {})
        claims.update(
            sub=identity.email,
            iat=int(now.timestamp()),
            exp=int((now + self._ttl).timestamp()),
        )
        return jwt.encode(claims, self._key, algorithm=ALGORITHM)

    def _claims(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self._key,
                algorithms=[ALGORITHM],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            logger.info(f"token.decode: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

    def extract_identity(self, token: str) -> str:
        """Return the subject of a correctly signed token, expired or not."""

        subject = self._claims(token).get("sub")
        if not subject:
            raise InvalidTokenError("Token has no subject")
        return str(subject)

    def expires_at(self, token: str) -> datetime:
        exp = self._claims(token).get("exp")
        if exp is None:
            raise InvalidTokenError("Token has no expiration")
        return datetime.fromtimestamp(int(exp), UTC)

    def is_valid(self, token: str, identity: User) -> bool:
        if self.extract_identity(token) != identity.email:
            return False
        return self._clock() < self.expires_at(token)


__all__ = ["ALGORITHM", "JwtTokenService"]
