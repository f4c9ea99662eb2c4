# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from expense_tracker.domain.expenses.entities import Expense, ExpenseData
from expense_tracker.domain.expenses.repositories import ExpenseRepository
from expense_tracker.shared.logging import logger

from .access import require_actor


class CreateExpenseUseCase:
    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(self, actor: Any, data: ExpenseData) -> Expense:
        user = require_actor(actor)
        created = self._expenses.add(Expense.new(user.id, data))
        logger.info(f"expenses.create: ok (user_id={user.id}, expense_id={created.id})")
        return created
