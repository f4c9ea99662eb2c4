# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Identity and ownership checks shared by the expense use cases."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from expense_tracker.domain.expenses.entities import Expense
from expense_tracker.domain.expenses.exceptions import ExpenseAccessDeniedError, ExpenseNotFoundError
from expense_tracker.domain.expenses.policies import ensure_owned
from expense_tracker.domain.expenses.repositories import ExpenseRepository
from expense_tracker.domain.users.entities import User
from expense_tracker.shared.errors import NotAuthenticatedError
from expense_tracker.shared.logging import logger


def require_actor(actor: Any) -> User:
    if actor is None:
        logger.error("expenses: no authenticated user supplied")
        raise NotAuthenticatedError()
    if not isinstance(actor, User):
        logger.error(f"expenses: principal is not a User ({type(actor).__name__})")
        raise NotAuthenticatedError("Invalid authentication principal")
    return actor


@contextmanager
def logged_access(actor: User, expense_id: int, *, action: str) -> Iterator[None]:
    try:
        yield
    except ExpenseNotFoundError:
        logger.warning(f"expenses.{action}: not found (expense_id={expense_id})")
        raise
    except ExpenseAccessDeniedError:
        logger.warning(
            f"expenses.{action}: denied (user_id={actor.id}, expense_id={expense_id})"
        )
        raise


def load_owned(
    expenses: ExpenseRepository, actor: User, expense_id: int, *, action: str
) -> Expense:
    """Fetch an expense the actor owns."""

    with logged_access(actor, expense_id, action=action):
        return ensure_owned(expenses.get(expense_id), actor.id, expense_id, action=action)


__all__ = ["load_owned", "logged_access", "require_actor"]
