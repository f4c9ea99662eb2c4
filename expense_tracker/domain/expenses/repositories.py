# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from .entities import Expense, ExpenseData


class ExpenseRepository(Protocol):
    def get(self, expense_id: int) -> Expense | None: ...

    def list_for_user(self, user_id: int) -> Sequence[Expense]:
        """Newest expense date first."""
        ...

    def list_for_user_between(
        self, user_id: int, start: date, end: date
    ) -> Sequence[Expense]:
        """Inclusive on both ends, newest expense date first."""
        ...

    def add(self, expense: Expense) -> Expense: ...

    def update_owned(self, user_id: int, expense_id: int, data: ExpenseData) -> Expense:
        """Load, check ownership and overwrite in a single transaction."""
        ...

    def delete_owned(self, user_id: int, expense_id: int) -> None:
        """Load, check ownership and delete in a single transaction."""
        ...
