# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from expense_tracker.domain.expenses.entities import Expense as DomainExpense
from expense_tracker.domain.expenses.entities import ExpenseData
from expense_tracker.domain.expenses.exceptions import ExpenseNotFoundError
from expense_tracker.domain.expenses.policies import ensure_owned
from expense_tracker.domain.expenses.repositories import ExpenseRepository
from expense_tracker.infrastructure.db.models import Expense
from expense_tracker.infrastructure.unit_of_work import unit_of_work_scope

_NEWEST_FIRST = (Expense.expense_date.desc(), Expense.id.desc())

# largest value a signed 64-bit INTEGER column holds
MAX_ROW_ID = 2**63 - 1


def _to_domain(row: Expense) -> DomainExpense:
    return DomainExpense(
        id=row.id,
        user_id=row.user_id,
        description=row.description,
        amount=row.amount,
        category=row.category,
        expense_date=row.expense_date,
    )


class SqlAlchemyExpenseRepository(ExpenseRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def _load(self, session: Session, expense_id: int) -> DomainExpense | None:
        if not 0 < expense_id <= MAX_ROW_ID:
            return None
        row = session.get(Expense, expense_id)
        return _to_domain(row) if row else None

    def get(self, expense_id: int) -> DomainExpense | None:
        with unit_of_work_scope(self._session_factory) as session:
            return self._load(session, expense_id)

    def list_for_user(self, user_id: int) -> Sequence[DomainExpense]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                select(Expense).where(Expense.user_id == user_id).order_by(*_NEWEST_FIRST)
            ).all()
            return [_to_domain(row) for row in rows]

    def list_for_user_between(
        self, user_id: int, start: date, end: date
    ) -> Sequence[DomainExpense]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                select(Expense)
                .where(
                    Expense.user_id == user_id,
                    Expense.expense_date.between(start, end),
                )
                .order_by(*_NEWEST_FIRST)
            ).all()
            return [_to_domain(row) for row in rows]

    def add(self, expense: DomainExpense) -> DomainExpense:
        with unit_of_work_scope(self._session_factory) as session:
            row = Expense(
                user_id=expense.user_id,
                description=expense.description,
                amount=expense.amount,
                category=expense.category,
                expense_date=expense.expense_date,
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def update_owned(
        self, user_id: int, expense_id: int, data: ExpenseData
    ) -> DomainExpense:
        with unit_of_work_scope(self._session_factory) as session:
            current = ensure_owned(
                self._load(session, expense_id), user_id, expense_id, action="update"
            )
            result = session.execute(
                update(Expense)
                .where(Expense.id == expense_id, Expense.user_id == user_id)
                .values(
                    description=data.description,
                    amount=data.amount,
                    category=data.category,
                    expense_date=data.expense_date,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                # deleted after the ownership check
                raise ExpenseNotFoundError(expense_id)
            return current.replaced_with(data)

    def delete_owned(self, user_id: int, expense_id: int) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            ensure_owned(self._load(session, expense_id), user_id, expense_id, action="delete")
            result = session.execute(
                delete(Expense)
                .where(Expense.id == expense_id, Expense.user_id == user_id)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise ExpenseNotFoundError(expense_id)
