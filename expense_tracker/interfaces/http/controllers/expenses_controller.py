# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from expense_tracker.application.use_cases.expenses.create_expense import CreateExpenseUseCase
from expense_tracker.application.use_cases.expenses.delete_expense import DeleteExpenseUseCase
from expense_tracker.application.use_cases.expenses.get_expense import GetExpenseUseCase
from expense_tracker.application.use_cases.expenses.list_expenses import ListExpensesUseCase
from expense_tracker.application.use_cases.expenses.update_expense import UpdateExpenseUseCase
from expense_tracker.domain.users.entities import User
from expense_tracker.infrastructure.auth import BearerAuthenticator, auth_required
from expense_tracker.interfaces.http.dto.expenses import (
    ExpenseQueryDTO,
    ExpenseRequestDTO,
    ExpenseResponseDTO,
)
from expense_tracker.shared.errors.validation import raise_validation_error
from expense_tracker.shared.logging import logger


def _read_body() -> ExpenseRequestDTO:
    try:
        return ExpenseRequestDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


def _respond(dto: ExpenseResponseDTO, status: int = 200) -> tuple[Response, int]:
    return jsonify(dto.model_dump(mode="json")), status


class ExpensesController:
    def __init__(
        self,
        *,
        authenticator: BearerAuthenticator,
        list_use_case: ListExpensesUseCase,
        get_use_case: GetExpenseUseCase,
        create_use_case: CreateExpenseUseCase,
        update_use_case: UpdateExpenseUseCase,
        delete_use_case: DeleteExpenseUseCase,
    ) -> None:
        self._authenticator = authenticator
        self._list = list_use_case
        self._get = get_use_case
        self._create = create_use_case
        self._update = update_use_case
        self._delete = delete_use_case

    def as_blueprint(self) -> Blueprint:
        protect = auth_required(self._authenticator)
        bp = Blueprint("expenses", __name__, url_prefix="/expenses")
        bp.add_url_rule("", "list", view_func=protect(self.list_expenses), methods=["GET"])
        bp.add_url_rule("", "create", view_func=protect(self.create), methods=["POST"])
        bp.add_url_rule(
            "/<int:expense_id>", "get", view_func=protect(self.get), methods=["GET"]
        )
        bp.add_url_rule(
            "/<int:expense_id>", "update", view_func=protect(self.update), methods=["PUT"]
        )
        bp.add_url_rule(
            "/<int:expense_id>", "delete", view_func=protect(self.delete), methods=["DELETE"]
        )
        return bp

    def list_expenses(self, *, actor: User):
        t0 = perf_counter()
        try:
            query = ExpenseQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)

        items = self._list.execute(
            actor,
            filter_name=query.filter,
            start_date=query.start_date,
            end_date=query.end_date,
        )
        dt = (perf_counter() - t0) * 1000
        logger.info(f"expenses.list: ok (user_id={actor.id}, n={len(items)}, dt_ms={dt:.0f})")
        return jsonify(
            [ExpenseResponseDTO.from_entity(item).model_dump(mode="json") for item in items]
        )

    def get(self, expense_id: int, *, actor: User):
        return _respond(ExpenseResponseDTO.from_entity(self._get.execute(actor, expense_id)))

    def create(self, *, actor: User):
        data = _read_body().to_data()
        created = self._create.execute(actor, data)
        return _respond(ExpenseResponseDTO.from_entity(created), 201)

    def update(self, expense_id: int, *, actor: User):
        data = _read_body().to_data()
        updated = self._update.execute(actor, expense_id, data)
        return _respond(ExpenseResponseDTO.from_entity(updated))

    def delete(self, expense_id: int, *, actor: User):
        self._delete.execute(actor, expense_id)
        return Response(status=204)
