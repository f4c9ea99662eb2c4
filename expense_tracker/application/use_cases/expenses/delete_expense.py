# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from expense_tracker.domain.expenses.repositories import ExpenseRepository
from expense_tracker.shared.logging import logger

from .access import logged_access, require_actor


class DeleteExpenseUseCase:
    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(self, actor: Any, expense_id: int) -> None:
        user = require_actor(actor)
        with logged_access(user, expense_id, action="delete"):
            self._expenses.delete_owned(user.id, expense_id)
        logger.info(f"expenses.delete: ok (user_id={user.id}, expense_id={expense_id})")
