"""Mini README: Tests for the dashboard routes.

Uses FastAPI's test client against an application built around a fresh
session so each test starts from an empty ledger.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from budgettracker.interface import create_application
from budgettracker.ledger import LedgerSession


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_application(LedgerSession()))


def _post(client: TestClient, **fields: str):
    payload = {"title": "Rent", "amount": "900", "category": "Bills", "type": "Expense", "date": "2024-05-01"}
    payload.update(fields)
    return client.post("/transactions", data=payload)


def test_dashboard_renders(client: TestClient) -> None:
    _post(client)
    response = client.get("/")
    assert response.status_code == 200
    assert "Personal Budget Tracker" in response.text
    assert "Rent" in response.text


def test_add_and_list_transactions(client: TestClient) -> None:
    created = _post(client)
    assert created.status_code == 201
    assert created.json()["transaction"]["transaction_id"] == 1

    _post(client, title="Salary", amount="1200", category="Income", type="Income")
    listing = client.get("/transactions", params={"type": "Expense", "category": "Bills"}).json()

    assert [row["title"] for row in listing["transactions"]] == ["Rent"]
    assert listing["revision"] == 2


def test_invalid_input_returns_error_kind(client: TestClient) -> None:
    missing = _post(client, title="")
    bad_amount = _post(client, amount="lots")

    assert missing.status_code == 400
    assert missing.json()["error"] == "validation"
    assert bad_amount.json() == {
        "ok": False,
        "transaction": None,
        "error": "format",
        "field": "amount",
        "message": "Amount must be numeric.",
    }
    assert client.get("/transactions").json()["transactions"] == []


def test_bad_filter_is_a_client_error(client: TestClient) -> None:
    assert client.get("/transactions", params={"sort": "title"}).status_code == 400


def test_edit_transaction(client: TestClient) -> None:
    _post(client)
    response = client.put(
        "/transactions/1",
        data={"title": "Rent", "amount": "950", "category": "Bills", "type": "Expense", "date": "2024-05-01"},
    )
    assert response.status_code == 200
    assert response.json()["transaction"]["amount"] == 950.0

    missing = client.put(
        "/transactions/5",
        data={"title": "Rent", "amount": "950", "category": "Bills", "type": "Expense", "date": "2024-05-01"},
    )
    assert missing.status_code == 404


def test_delete_requires_confirmation(client: TestClient) -> None:
    _post(client)

    unconfirmed = client.delete("/transactions/1")
    assert unconfirmed.status_code == 409
    assert len(client.get("/transactions").json()["transactions"]) == 1

    assert client.delete("/transactions/1", params={"confirm": "true"}).status_code == 200
    assert client.delete("/transactions/1", params={"confirm": "true"}).status_code == 404


def test_summary_reports_overspending(client: TestClient) -> None:
    _post(client, amount="500", category="Shopping")

    summary = client.get("/summary").json()

    assert summary["net_balance"] == -500.0
    assert summary["is_overspending"] is True
    assert summary["warning"] == "Your net balance is negative. You may be overspending."
    assert summary["category_totals"] == {"Shopping": 500.0}
    assert summary["summary_lines"][0] == "Total Income: $0.00"


def test_categories_route(client: TestClient) -> None:
    categories = client.get("/categories").json()
    assert categories["income"] == ["Income"]
    assert "Groceries" in categories["expense"]
    assert categories["types"] == ["All", "Income", "Expense"]
