# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import calendar
from collections.abc import Sequence
from datetime import date, timedelta
from typing import Any

from expense_tracker.domain.expenses.entities import Expense
from expense_tracker.domain.expenses.repositories import ExpenseRepository
from expense_tracker.shared.errors import InvalidInputError
from expense_tracker.shared.logging import logger

from .access import require_actor

WEEK = "week"
MONTH = "month"
THREE_MONTHS = "3months"


def subtract_months(day: date, months: int) -> date:
    """Calendar month arithmetic; the day is clamped to the target month's length."""

    index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def resolve_period(filter_name: str, today: date) -> tuple[date, date] | None:
    """Map a named filter to an inclusive date range, or None when unrecognised."""

    name = filter_name.strip().lower()
    if name == WEEK:
        return today - timedelta(weeks=1), today
    if name == MONTH:
        return subtract_months(today, 1), today
    if name == THREE_MONTHS:
        return subtract_months(today, 3), today
    return None


def validate_range(start_date: date | None, end_date: date | None) -> tuple[date, date]:
    if start_date is None or end_date is None:
        raise InvalidInputError("Start date and end date are required")
    if start_date > end_date:
        raise InvalidInputError("Start date must be before or equal to end date")
    return start_date, end_date


class ListExpensesUseCase:
    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(
        self,
        actor: Any,
        *,
        filter_name: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        today: date | None = None,
    ) -> Sequence[Expense]:
        user = require_actor(actor)
        today = today or date.today()

        if filter_name is not None:
            period = resolve_period(filter_name, today)
            if period is None:
                logger.info(f"expenses.list: unknown filter {filter_name!r}, returning all")
                return self._expenses.list_for_user(user.id)
            return self._between(user.id, *period)

        if start_date is None and end_date is None:
            return self._expenses.list_for_user(user.id)

        return self._between(user.id, start_date, end_date)

    def _between(
        self, user_id: int, start_date: date | None, end_date: date | None
    ) -> Sequence[Expense]:
        start, end = validate_range(start_date, end_date)
        logger.info(f"expenses.list: user_id={user_id} between {start} and {end}")
        return self._expenses.list_for_user_between(user_id, start, end)
