from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from decimal import Decimal

import pytest
from fakes import InMemoryExpenseRepository
from flask import Flask

from expense_tracker.application.use_cases.expenses.create_expense import CreateExpenseUseCase
from expense_tracker.application.use_cases.expenses.delete_expense import DeleteExpenseUseCase
from expense_tracker.application.use_cases.expenses.get_expense import GetExpenseUseCase
from expense_tracker.application.use_cases.expenses.list_expenses import ListExpensesUseCase
from expense_tracker.application.use_cases.expenses.update_expense import UpdateExpenseUseCase
from expense_tracker.domain.expenses.entities import Expense, ExpenseCategory
from expense_tracker.domain.users.entities import User
from expense_tracker.interfaces.http.controllers.expenses_controller import ExpensesController
from expense_tracker.shared.errors import NotAuthenticatedError
from expense_tracker.shared.middleware.error_handler import configure_error_handling

ALICE = User(
    id=1,
    email="alice@example.com",
    password_hash="x",
    first_name="Alice",
    last_name="Smith",
    created_at=datetime.now(UTC),
)
BOB = User(
    id=2,
    email="bob@example.com",
    password_hash="x",
    first_name="Bob",
    last_name="Jones",
    created_at=datetime.now(UTC),
)


class StubAuthenticator:
    """Maps 'Bearer <name>' to a fixed user."""

    users = {"alice": ALICE, "bob": BOB}

    def authenticate(self, authorization: str | None) -> User:
        name = (authorization or "").removeprefix("Bearer ").strip()
        if name not in self.users:
            raise NotAuthenticatedError()
        return self.users[name]


@pytest.fixture()
def repo() -> InMemoryExpenseRepository:
    return InMemoryExpenseRepository()


@pytest.fixture()
def client(repo: InMemoryExpenseRepository):
    app = Flask(__name__)
    app.json.sort_keys = False
    configure_error_handling(app)
    controller = ExpensesController(
        authenticator=StubAuthenticator(),
        list_use_case=ListExpensesUseCase(expenses=repo),
        get_use_case=GetExpenseUseCase(expenses=repo),
        create_use_case=CreateExpenseUseCase(expenses=repo),
        update_use_case=UpdateExpenseUseCase(expenses=repo),
        delete_use_case=DeleteExpenseUseCase(expenses=repo),
    )
    app.register_blueprint(controller.as_blueprint())
    with app.test_client() as test_client:
        yield test_client


def _auth(name: str = "alice") -> dict[str, str]:
    return {"Authorization": f"Bearer {name}"}


def _body(**overrides) -> dict[str, object]:
    body: dict[str, object] = {
        "description": "Lunch",
        "amount": 12.5,
        "category": "FOOD",
        "expenseDate": date.today().isoformat(),
    }
    body.update(overrides)
    return body


def _store(repo: InMemoryExpenseRepository, owner: User, day: date | None = None) -> Expense:
    return repo.add(
        Expense(
            id=0,
            user_id=owner.id,
            description="Seeded",
            amount=Decimal("5.00"),
            category=ExpenseCategory.OTHER,
            expense_date=day or date.today(),
        )
    )


def test_requests_without_token_are_rejected(client) -> None:
    response = client.get("/expenses")

    assert response.status_code == 401
    assert response.get_json()["path"] == "/expenses"


def test_create_returns_201_with_camel_case_body(client, repo) -> None:
    response = client.post("/expenses", json=_body(), headers=_auth())

    assert response.status_code == 201
    body = response.get_json()
    assert list(body) == ["id", "description", "amount", "category", "expenseDate"]
    assert body["amount"] == 12.5
    assert body["category"] == "FOOD"
    assert repo.rows[body["id"]].user_id == ALICE.id


def test_create_accepts_lowercase_category(client) -> None:
    response = client.post("/expenses", json=_body(category="travel"), headers=_auth())

    assert response.status_code == 201
    assert response.get_json()["category"] == "TRAVEL"


def test_amount_boundary(client) -> None:
    too_small = client.post("/expenses", json=_body(amount="0.00"), headers=_auth())
    smallest = client.post("/expenses", json=_body(amount="0.01"), headers=_auth())

    assert too_small.status_code == 400
    assert too_small.get_json()["code"] == "validation_error"
    assert smallest.status_code == 201
    assert smallest.get_json()["amount"] == 0.01


@pytest.mark.parametrize(
    "override",
    [
        {"description": "   "},
        {"description": "x" * 256},
        {"category": "PETS"},
        {"amount": "12.345"},
        {"expenseDate": (date.today() + timedelta(days=1)).isoformat()},
        {"expenseDate": "not-a-date"},
    ],
)
def test_create_rejects_invalid_fields(client, repo, override) -> None:
    response = client.post("/expenses", json=_body(**override), headers=_auth())

    assert response.status_code == 400
    assert response.get_json()["errors"]
    assert repo.rows == {}


def test_create_rejects_missing_fields(client) -> None:
    response = client.post("/expenses", json={"description": "Lunch"}, headers=_auth())

    assert response.status_code == 400
    assert len(response.get_json()["errors"]) == 3


def test_list_returns_own_expenses(client, repo) -> None:
    mine = _store(repo, ALICE)
    _store(repo, BOB)

    response = client.get("/expenses", headers=_auth())

    assert response.status_code == 200
    assert [item["id"] for item in response.get_json()] == [mine.id]


def test_list_with_filter(client, repo) -> None:
    recent = _store(repo, ALICE)
    _store(repo, ALICE, date.today() - timedelta(days=30))

    response = client.get("/expenses?filter=week", headers=_auth())

    assert [item["id"] for item in response.get_json()] == [recent.id]


def test_list_inverted_range_returns_400(client) -> None:
    response = client.get(
        "/expenses?startDate=2024-02-01&endDate=2024-01-01", headers=_auth()
    )

    assert response.status_code == 400
    assert response.get_json()["code"] == "invalid_input"


def test_list_bad_date_parameter_returns_400(client) -> None:
    response = client.get("/expenses?startDate=yesterday&endDate=2024-01-01", headers=_auth())

    assert response.status_code == 400


def test_get_missing_expense_returns_404(client) -> None:
    response = client.get("/expenses/42", headers=_auth())

    assert response.status_code == 404
    body = response.get_json()
    assert body["message"] == "Expense not found with ID: 42"
    assert body["error"] == "Not Found"


def test_foreign_expense_returns_403(client, repo) -> None:
    theirs = _store(repo, BOB)

    get = client.get(f"/expenses/{theirs.id}", headers=_auth())
    put = client.put(f"/expenses/{theirs.id}", json=_body(), headers=_auth())
    delete = client.delete(f"/expenses/{theirs.id}", headers=_auth())

    assert [get.status_code, put.status_code, delete.status_code] == [403, 403, 403]
    assert theirs.id in repo.rows


def test_update_replaces_expense(client, repo) -> None:
    mine = _store(repo, ALICE)

    response = client.put(
        f"/expenses/{mine.id}",
        json=_body(description="Dinner", amount=40, category="ENTERTAINMENT"),
        headers=_auth(),
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["id"] == mine.id
    assert body["description"] == "Dinner"
    assert body["category"] == "ENTERTAINMENT"


def test_update_invalid_body_on_missing_expense_is_400(client) -> None:
    response = client.put("/expenses/99", json={"amount": 0}, headers=_auth())

    assert response.status_code == 400


def test_delete_returns_204_then_404(client, repo) -> None:
    mine = _store(repo, ALICE)

    first = client.delete(f"/expenses/{mine.id}", headers=_auth())
    second = client.delete(f"/expenses/{mine.id}", headers=_auth())

    assert first.status_code == 204
    assert first.data == b""
    assert second.status_code == 404


def test_unknown_route_uses_error_body(client) -> None:
    response = client.get("/nowhere", headers=_auth())

    assert response.status_code == 404
    assert response.get_json()["path"] == "/nowhere"


def test_long_unknown_filter_lists_everything(client, repo) -> None:
    recent = _store(repo, ALICE)
    old = _store(repo, ALICE, date.today() - timedelta(days=400))

    response = client.get(f"/expenses?filter={'z' * 40}", headers=_auth())

    assert response.status_code == 200
    assert [item["id"] for item in response.get_json()] == [recent.id, old.id]
