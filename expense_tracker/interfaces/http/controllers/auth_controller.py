# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from expense_tracker.application.use_cases.users.login_user import LoginUserUseCase
from expense_tracker.application.use_cases.users.register_user import RegisterUserUseCase
from expense_tracker.interfaces.http.dto.auth import (
    AuthResponseDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
)
from expense_tracker.shared.errors.validation import raise_validation_error


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._register_use_case.execute(
            dto.first_name, dto.last_name, str(dto.email), dto.password
        )
        return jsonify(AuthResponseDTO.from_result(result).model_dump(mode="json")), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._login_use_case.execute(str(dto.email), dto.password)
        return jsonify(AuthResponseDTO.from_result(result).model_dump(mode="json")), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
