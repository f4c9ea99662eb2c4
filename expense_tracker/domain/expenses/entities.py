# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Expense records and the rules every stored expense satisfies."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from enum import StrEnum

from ..exceptions import InvariantViolation

MIN_AMOUNT = Decimal("0.01")


class ExpenseCategory(StrEnum):
    FOOD = "FOOD"
    GROCERIES = "GROCERIES"
    TRANSPORT = "TRANSPORT"
    UTILITIES = "UTILITIES"
    ENTERTAINMENT = "ENTERTAINMENT"
    HEALTH = "HEALTH"
    SHOPPING = "SHOPPING"
    EDUCATION = "EDUCATION"
    TRAVEL = "TRAVEL"
    OTHER = "OTHER"


@dataclass(slots=True, frozen=True)
class ExpenseData:
    """Caller-supplied fields of an expense; used for both create and full update."""

    description: str
    amount: Decimal
    category: ExpenseCategory
    expense_date: date

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise InvariantViolation("description must not be blank", field="description")
        if self.amount < MIN_AMOUNT:
            raise InvariantViolation(f"amount must be at least {MIN_AMOUNT}", field="amount")
        object.__setattr__(self, "category", ExpenseCategory(self.category))


@dataclass(slots=True, frozen=True)
class Expense:
    """An expense owned by exactly one user."""

    id: int
    user_id: int
    description: str
    amount: Decimal
    category: ExpenseCategory
    expense_date: date

    def __post_init__(self) -> None:
        if self.user_id <= 0:
            raise InvariantViolation("expense must have an owner", field="user_id")
        # re-run the field rules
        ExpenseData(
            description=self.description,
            amount=self.amount,
            category=self.category,
            expense_date=self.expense_date,
        )
        object.__setattr__(self, "category", ExpenseCategory(self.category))

    @classmethod
    def new(cls, user_id: int, data: ExpenseData) -> Expense:
        """Build an unsaved expense; the repository assigns the id."""

        return cls(
            id=0,
            user_id=user_id,
            description=data.description,
            amount=data.amount,
            category=data.category,
            expense_date=data.expense_date,
        )

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

    def replaced_with(self, data: ExpenseData) -> Expense:
        return replace(
            self,
            description=data.description,
            amount=data.amount,
            category=data.category,
            expense_date=data.expense_date,
        )
