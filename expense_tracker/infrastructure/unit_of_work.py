# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""One transaction per repository call."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from expense_tracker.shared.logging import logger


class SqlAlchemyUnitOfWork:
    """Opens a session on enter; commits on clean exit, rolls back on error."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        session = self.session
        try:
            if exc is not None:
                logger.warning(f"uow: rollback due to {exc_type.__name__}")
                session.rollback()
            else:
                session.commit()
        except Exception:
            logger.exception("uow: commit failed, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("UnitOfWork session accessed before entering context")
        return self._session


@contextmanager
def unit_of_work_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    with SqlAlchemyUnitOfWork(factory) as uow:
        yield uow.session
