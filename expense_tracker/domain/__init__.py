# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .expenses.entities import Expense, ExpenseCategory, ExpenseData
from .users.entities import AuthResult, User

__all__ = [
    "AuthResult",
    "Expense",
    "ExpenseCategory",
    "ExpenseData",
    "InvariantViolation",
    "InvariantViolationError",
    "User",
]
