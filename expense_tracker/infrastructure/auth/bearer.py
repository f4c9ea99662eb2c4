# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from flask import g, request

from expense_tracker.application.services.token_service import JwtTokenService
from expense_tracker.domain.users.entities import User
from expense_tracker.domain.users.repositories import UserRepository
from expense_tracker.shared.errors import InvalidTokenError, NotAuthenticatedError
from expense_tracker.shared.logging import logger

_PREFIX = "Bearer "


def bearer_token(authorization: str | None) -> str:
    if not authorization or not authorization.startswith(_PREFIX):
        return ""
    return authorization[len(_PREFIX):].strip()


class BearerAuthenticator:
    """Resolves the Authorization header to a stored user."""

    def __init__(self, *, tokens: JwtTokenService, users: UserRepository) -> None:
        self._tokens = tokens
        self._users = users

    def authenticate(self, authorization: str | None) -> User:
        token = bearer_token(authorization)
        if not token:
            raise NotAuthenticatedError("Missing bearer token")

        email = self._tokens.extract_identity(token)
        user = self._users.find_by_email(email)
        if user is None:
            logger.warning("auth.bearer: token subject has no account")
            raise InvalidTokenError()
        if not self._tokens.is_valid(token, user):
            logger.info(f"auth.bearer: expired token (user_id={user.id})")
            raise InvalidTokenError("Token has expired")
        return user


def auth_required(authenticator: BearerAuthenticator) -> Callable[[Callable], Callable]:
    """Reject unauthenticated requests; pass the user to the view as ``actor``."""

    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def inner(*a, **kw):
            user = authenticator.authenticate(request.headers.get("Authorization"))
            g.user_id = user.id
            logger.debug(f"Auth OK: user={user.id} {request.method} {request.path}")
            return f(*a, actor=user, **kw)

        return inner

    return decorator


__all__ = ["BearerAuthenticator", "auth_required", "bearer_token"]
