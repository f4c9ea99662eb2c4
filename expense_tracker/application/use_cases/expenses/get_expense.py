# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from expense_tracker.domain.expenses.entities import Expense
from expense_tracker.domain.expenses.repositories import ExpenseRepository

from .access import load_owned, require_actor


class GetExpenseUseCase:
    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(self, actor: Any, expense_id: int) -> Expense:
        user = require_actor(actor)
        return load_owned(self._expenses, user, expense_id, action="view")
