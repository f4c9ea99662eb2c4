# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from .entities import Expense
from .exceptions import ExpenseAccessDeniedError, ExpenseNotFoundError


def ensure_owned(
    expense: Expense | None, user_id: int, expense_id: int, *, action: str
) -> Expense:
    """Existence first, then ownership: missing is 404, someone else's is 403."""

    if expense is None:
        raise ExpenseNotFoundError(expense_id)
    if not expense.is_owned_by(user_id):
        raise ExpenseAccessDeniedError(action)
    return expense
