import pytest
from fastapi.testclient import TestClient

from src.api.main import app


def get_valid_payload():
    return {
        "accounts": [
            {"id": "N90394", "balance": 1000, "currency": "USD"},
            {"id": "N9122", "balance": 500, "currency": "usd"},
        ],
        "instruction": "DEBIT 500 USD FROM ACCOUNT N90394 FOR CREDIT TO ACCOUNT N9122",
    }


def test_successful_instruction_returns_200_with_settled_accounts():
    with TestClient(app) as client:
        response = client.post("/payment-instructions", json=get_valid_payload())

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Transaction executed successfully"
    data = body["data"]
    assert data["status"] == "successful"
    assert data["status_code"] == "AP00"
    assert data["amount"] == 500
    assert [(a["id"], a["currency"]) for a in data["accounts"]] == [
        ("N90394", "USD"),
        ("N9122", "USD"),
    ]
    assert [float(a["balance"]) for a in data["accounts"]] == [500.0, 1000.0]
    assert [float(a["balance_before"]) for a in data["accounts"]] == [1000.0, 500.0]


def test_pending_instruction_returns_200():
    payload = get_valid_payload()
    payload["instruction"] += " ON 2099-12-31"

    with TestClient(app) as client:
        response = client.post("/payment-instructions", json=payload)

    assert response.status_code == 200
    assert response.json()["message"] == "Transaction executed successfully"
    assert response.json()["data"]["status"] == "pending"
    assert response.json()["data"]["status_code"] == "AP02"


def test_failed_instruction_returns_400_with_status_reason():
    payload = get_valid_payload()
    payload["instruction"] = payload["instruction"].replace("500", "5000", 1)

    with TestClient(app) as client:
        response = client.post("/payment-instructions", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Insufficient funds in debit account"
    assert body["data"]["status"] == "failed"
    assert body["data"]["status_code"] == "AC01"


def test_business_date_override_drives_pending_decision(monkeypatch):
    monkeypatch.setenv("PAYMENT_BUSINESS_DATE_OVERRIDE", "2026-01-15")
    payload = get_valid_payload()
    payload["instruction"] += " ON 2026-01-16"

    with TestClient(app) as client:
        pending = client.post("/payment-instructions", json=payload)
        monkeypatch.setenv("PAYMENT_BUSINESS_DATE_OVERRIDE", "2026-01-16")
        executed = client.post("/payment-instructions", json=payload)

    assert pending.json()["data"]["status"] == "pending"
    assert executed.json()["data"]["status"] == "successful"


def test_invalid_business_date_override_is_a_server_error(monkeypatch):
    monkeypatch.setenv("PAYMENT_BUSINESS_DATE_OVERRIDE", "15/01/2026")
    client = TestClient(app, raise_server_exceptions=False)

    response = client.post("/payment-instructions", json=get_valid_payload())

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/problem+json")
    assert response.json()["detail"] == "An unexpected error occurred."


def test_endpoint_can_be_disabled(monkeypatch):
    monkeypatch.setenv("PAYMENT_INSTRUCTIONS_ENABLED", "false")

    with TestClient(app) as client:
        response = client.post("/payment-instructions", json=get_valid_payload())

    assert response.status_code == 404
    assert response.json()["detail"] == "PAYMENT_INSTRUCTIONS_DISABLED"


@pytest.mark.parametrize(
    "payload",
    [
        {"instruction": "DEBIT 1 USD"},
        {"accounts": []},
        {"accounts": [{"id": "A", "currency": "USD"}], "instruction": "DEBIT 1 USD"},
        {"accounts": [{"id": "A", "balance": "lots", "currency": "USD"}], "instruction": "x"},
        {"accounts": "A", "instruction": "DEBIT 1 USD"},
    ],
)
def test_schema_violations_return_problem_details(payload):
    with TestClient(app) as client:
        response = client.post("/payment-instructions", json=payload)

    assert response.status_code == 422
    assert response.headers["content-type"].startswith("application/problem+json")
    body = response.json()
    assert body["status"] == 422
    assert body["instance"] == "/payment-instructions"
    assert body["errors"]


def test_unexpected_core_error_returns_problem_details(monkeypatch):
    def _boom(*_args, **_kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("src.core.payments.engine.settle_instruction", _boom)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.post("/payment-instructions", json=get_valid_payload())

    assert response.status_code == 500
    assert response.json()["title"] == "Internal Server Error"


def test_balances_past_the_supported_width_are_schema_violations():
    payload = get_valid_payload()
    payload["accounts"][0]["balance"] = "1" + "0" * 48

    with TestClient(app) as client:
        response = client.post("/payment-instructions", json=payload)

    assert response.status_code == 422


def test_oversized_exponent_amount_is_a_business_failure():
    payload = get_valid_payload()
    payload["instruction"] = payload["instruction"].replace("500", "1e3000000", 1)

    with TestClient(app) as client:
        response = client.post("/payment-instructions", json=payload)

    assert response.status_code == 400
    assert response.json()["data"]["status_code"] == "AM01"


def test_response_balances_are_documented_and_sent_as_decimal_strings():
    with TestClient(app) as client:
        schema_text = client.get("/openapi.json").text
        response = client.post("/payment-instructions", json=get_valid_payload())

    assert "exact decimal string" in schema_text
    assert response.json()["data"]["accounts"][0]["balance"] == "500"
    assert response.json()["data"]["accounts"][0]["balance_before"] == "1000"
