# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from expense_tracker.application.services.password_hashing import WerkzeugPasswordHasher
from expense_tracker.application.services.token_service import JwtTokenService
from expense_tracker.application.use_cases.expenses.create_expense import CreateExpenseUseCase
from expense_tracker.application.use_cases.expenses.delete_expense import DeleteExpenseUseCase
from expense_tracker.application.use_cases.expenses.get_expense import GetExpenseUseCase
from expense_tracker.application.use_cases.expenses.list_expenses import ListExpensesUseCase
from expense_tracker.application.use_cases.expenses.update_expense import UpdateExpenseUseCase
from expense_tracker.application.use_cases.users.login_user import LoginUserUseCase
from expense_tracker.application.use_cases.users.register_user import RegisterUserUseCase
from expense_tracker.infrastructure.auth import BearerAuthenticator
from expense_tracker.infrastructure.db import SessionLocal
from expense_tracker.infrastructure.repositories.expenses import SqlAlchemyExpenseRepository
from expense_tracker.infrastructure.repositories.users import SqlAlchemyUserRepository
from expense_tracker.interfaces.http.controllers.auth_controller import AuthController
from expense_tracker.interfaces.http.controllers.expenses_controller import ExpensesController
from expense_tracker.interfaces.http.controllers.misc_controller import MiscController
from expense_tracker.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            key=self._config.jwt.key_bytes(),
            ttl=timedelta(milliseconds=self._config.jwt.expiration_ms),
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(SessionLocal)

    @cached_property
    def expense_repository(self) -> SqlAlchemyExpenseRepository:
        return SqlAlchemyExpenseRepository(SessionLocal)

    @cached_property
    def authenticator(self) -> BearerAuthenticator:
        return BearerAuthenticator(tokens=self.token_service, users=self.user_repository)

    # Auth use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    # Expense use cases

    @cached_property
    def list_expenses_use_case(self) -> ListExpensesUseCase:
        return ListExpensesUseCase(expenses=self.expense_repository)

    @cached_property
    def get_expense_use_case(self) -> GetExpenseUseCase:
        return GetExpenseUseCase(expenses=self.expense_repository)

    @cached_property
    def create_expense_use_case(self) -> CreateExpenseUseCase:
        return CreateExpenseUseCase(expenses=self.expense_repository)

    @cached_property
    def update_expense_use_case(self) -> UpdateExpenseUseCase:
        return UpdateExpenseUseCase(expenses=self.expense_repository)

    @cached_property
    def delete_expense_use_case(self) -> DeleteExpenseUseCase:
        return DeleteExpenseUseCase(expenses=self.expense_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def expenses_controller(self) -> ExpensesController:
        return ExpensesController(
            authenticator=self.authenticator,
            list_use_case=self.list_expenses_use_case,
            get_use_case=self.get_expense_use_case,
            create_use_case=self.create_expense_use_case,
            update_use_case=self.update_expense_use_case,
            delete_use_case=self.delete_expense_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
