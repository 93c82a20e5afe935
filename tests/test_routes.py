"""HTTP API tests."""

import datetime

from family_budget.config.setting import settings
from family_budget.shared.money import MAX_SAFE_INTEGER


def test_health_check(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert data["message"] == f"{settings.app_name} API is running"
    assert datetime.datetime.fromisoformat(data["timestamp"])


def test_test_endpoint_reports_environment(client, monkeypatch):
    monkeypatch.setattr(settings, "environment", "production")

    response = client.get("/api/test")

    assert response.status_code == 200
    assert response.json() == {
        "message": "Hello from Family Budget API!",
        "environment": "production",
    }


def test_add_expense_with_custom_date(client):
    response = client.post(
        "/api/expenses",
        json={"amount": 1500.6, "date": "2024-01-15", "useCustomDate": True},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["expense"]["amount"] == 1501
    assert data["expense"]["timestamp"] == "2024/01/15(月)"
    assert data["expense"]["formatted_amount"] == "¥1,501"
    assert data["balance"] == -1501


def test_add_income_without_custom_date_uses_today(client):
    response = client.post(
        "/api/incomes",
        json={"amount": 50000, "date": "1999-01-01", "useCustomDate": False},
    )

    assert response.status_code == 201
    assert not response.json()["income"]["timestamp"].startswith("1999/")


def test_invalid_form_returns_field_errors(client):
    response = client.post(
        "/api/expenses",
        json={"amount": 0, "date": "2024-13-40", "useCustomDate": True},
    )

    assert response.status_code == 422
    errors = response.json()["detail"]["errors"]
    assert set(errors) == {"amount", "date"}

    history = client.get("/api/expenses").json()
    assert history["count"] == 0


def test_malformed_json_rejected(client):
    response = client.post(
        "/api/incomes",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
    assert "form" in response.json()["detail"]["errors"]


def test_history_and_summary(client):
    client.post("/api/incomes", json={"amount": 50000, "date": "2024-01-01", "useCustomDate": True})
    client.post("/api/expenses", json={"amount": 1000, "date": "2024-01-15", "useCustomDate": True})
    client.post("/api/expenses", json={"amount": 500, "date": "2024-01-16", "useCustomDate": True})

    expenses = client.get("/api/expenses").json()
    assert expenses["count"] == 2
    assert expenses["total"] == 1500
    assert expenses["formatted_total"] == "¥1,500"
    assert [t["amount"] for t in expenses["transactions"]] == [500, 1000]

    incomes = client.get("/api/incomes").json()
    assert incomes["total"] == 50000

    summary = client.get("/api/summary").json()["summary"]
    assert summary["balance"] == 48500
    assert summary["total_income"] == 50000
    assert summary["total_expense"] == 1500
    assert summary["formatted"]["balance"] == "¥48,500"


def test_summary_shows_negative_balance(client):
    client.post("/api/expenses", json={"amount": 1500, "date": "2024-01-15", "useCustomDate": True})

    summary = client.get("/api/summary").json()["summary"]
    assert summary["formatted"]["balance"] == "¥-1,500"


def test_quick_entry_running_balance(client):
    response = client.post("/api/quick-entry/expenses", json={"amount": 1500})
    assert response.status_code == 201
    assert response.json()["balance"] == settings.expense_initial_balance - 1500

    client.post("/api/quick-entry/incomes", json={"amount": 3000})

    ledger = client.get("/api/quick-entry").json()
    assert ledger["expenses"]["count"] == 1
    assert ledger["expenses"]["balance"] == settings.expense_initial_balance - 1500
    assert ledger["incomes"]["total"] == 3000
    assert ledger["incomes"]["formatted_balance"] == format_yen(settings.income_initial_balance + 3000)


def test_quick_entry_rejects_non_positive_amount(client):
    response = client.post("/api/quick-entry/expenses", json={"amount": -5})

    assert response.status_code == 422
    assert response.json()["detail"]["errors"]["amount"] == "Amount must be a positive number"


def test_state_is_fresh_per_app_start(client):
    assert client.get("/api/expenses").json()["count"] == 0
    assert client.get("/api/quick-entry").json()["incomes"]["count"] == 0


def format_yen(value):
    return f"¥{value:,}"


def test_history_total_beyond_safe_integer_is_server_error(client):
    for path in ("/api/expenses", "/api/incomes"):
        for _ in range(2):
            response = client.post(
                path,
                json={"amount": MAX_SAFE_INTEGER, "date": "2024-01-15", "useCustomDate": True},
            )
            assert response.status_code == 201

        response = client.get(path)
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal Server Error"}
