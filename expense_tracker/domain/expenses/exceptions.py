# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from expense_tracker.shared.errors.base import DomainError


class ExpenseNotFoundError(DomainError):
    code = "expense_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, expense_id: int) -> None:
        super().__init__(
            f"Expense not found with ID: {expense_id}",
            context={"expenseId": expense_id},
        )


class ExpenseAccessDeniedError(DomainError):
    code = "expense_access_denied"
    status = HTTPStatus.FORBIDDEN

    def __init__(self, action: str) -> None:
        super().__init__(f"Not authorized to {action} this expense")
