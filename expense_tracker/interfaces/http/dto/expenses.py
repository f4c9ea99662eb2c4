from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import Field, StringConstraints, field_serializer, field_validator
from pydantic_core import PydanticCustomError

from expense_tracker.domain.expenses.entities import (
    MIN_AMOUNT,
    Expense,
    ExpenseCategory,
    ExpenseData,
)

from .base import CamelModel


class ExpenseRequestDTO(CamelModel):
    description: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
    amount: Decimal = Field(ge=MIN_AMOUNT, max_digits=12, decimal_places=2)
    category: ExpenseCategory
    expense_date: date

    @field_validator("category", mode="before")
    @classmethod
    def _upper_category(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("expense_date")
    @classmethod
    def _not_in_future(cls, value: date) -> date:
        if value > date.today():
            raise PydanticCustomError(
                "date_in_future",
                "Expense date cannot be in the future",
                {"max": date.today().isoformat()},
            )
        return value

    def to_data(self) -> ExpenseData:
        return ExpenseData(
            description=self.description,
            amount=self.amount,
            category=self.category,
            expense_date=self.expense_date,
        )


class ExpenseQueryDTO(CamelModel):
    # any value is accepted; unknown names list everything
    filter: str | None = None
    start_date: date | None = None
    end_date: date | None = None


class ExpenseResponseDTO(CamelModel):
    id: int
    description: str
    amount: Decimal
    category: ExpenseCategory
    expense_date: date

    @field_serializer("amount")
    def _amount_as_number(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def from_entity(cls, expense: Expense) -> ExpenseResponseDTO:
        return cls(
            id=expense.id,
            description=expense.description,
            amount=expense.amount,
            category=expense.category,
            expense_date=expense.expense_date,
        )
