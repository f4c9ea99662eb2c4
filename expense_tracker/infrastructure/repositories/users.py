# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from expense_tracker.domain.users.entities import User as DomainUser
from expense_tracker.domain.users.exceptions import UserAlreadyExistsError
from expense_tracker.domain.users.repositories import UserRepository
from expense_tracker.infrastructure.db.models import User
from expense_tracker.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        first_name=row.first_name,
        last_name=row.last_name,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            return _to_domain(row) if row else None

    def exists_by_email(self, email: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            return bool(session.scalar(select(exists().where(User.email == email))))

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    email=user.email,
                    password_hash=user.password_hash,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            # lost a race with a concurrent registration
            raise UserAlreadyExistsError(f"Email already exists: {user.email}") from exc
