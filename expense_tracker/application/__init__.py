# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import WerkzeugPasswordHasher
from .services.token_service import JwtTokenService
from .use_cases.expenses.create_expense import CreateExpenseUseCase
from .use_cases.expenses.delete_expense import DeleteExpenseUseCase
from .use_cases.expenses.get_expense import GetExpenseUseCase
from .use_cases.expenses.list_expenses import ListExpensesUseCase
from .use_cases.expenses.update_expense import UpdateExpenseUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "CreateExpenseUseCase",
    "DeleteExpenseUseCase",
    "GetExpenseUseCase",
    "JwtTokenService",
    "ListExpensesUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UpdateExpenseUseCase",
    "WerkzeugPasswordHasher",
]
