"""Integration tests for API endpoints"""

import logging
import pytest
from fastapi.testclient import TestClient
from loan_gateway.api.main import create_app
from loan_gateway.config import settings
from loan_gateway.domain.exceptions import DecisionFaultError
from loan_gateway.api.v1 import decision as decision_module
from conftest import DEBTOR_CODE, SEGMENT_1_CODE, SEGMENT_2_CODE, SEGMENT_3_CODE, UNDERAGE_CODE, INVALID_CODE


def decision_payload(identity_code: str, amount: int = 4000, period: int = 12, country: str = "Estonia") -> dict:
    return {
        "identity_code": identity_code,
        "loan_amount": amount,
        "loan_period": period,
        "country": country,
    }


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "loan-decision-gateway", "version": "0.1.0"}


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/loan/decision", json=decision_payload(SEGMENT_2_CODE))

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "loan_decision_total" in response.text
    assert "http_request_duration_seconds" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


@pytest.mark.parametrize(
    "identity_code,amount,expected_amount,expected_period",
    [
        (SEGMENT_1_CODE, 4000, 2000, 20),
        (SEGMENT_2_CODE, 4000, 3900, 13),
        (SEGMENT_2_CODE, 2000, 3600, 12),
        (SEGMENT_3_CODE, 4000, 10000, 12),
    ],
)
def test_decision_endpoint_approval(
    client: TestClient,
    identity_code: str,
    amount: int,
    expected_amount: int,
    expected_period: int,
):
    """Test POST /v1/loan/decision with approval"""
    response = client.post("/v1/loan/decision", json=decision_payload(identity_code, amount))

    assert response.status_code == 200
    assert response.json() == {
        "approved_amount": expected_amount,
        "approved_period": expected_period,
        "error_message": None,
    }


@pytest.mark.parametrize(
    "payload,message",
    [
        (decision_payload(INVALID_CODE), "Invalid personal ID code."),
        (decision_payload(SEGMENT_1_CODE, amount=1999), "Loan amount must be between €2000 and €10000."),
        (decision_payload(SEGMENT_1_CODE, amount=10001), "Loan amount must be between €2000 and €10000."),
        (decision_payload(SEGMENT_1_CODE, period=11), "Loan period must be between 12 and 48 months."),
        (decision_payload(SEGMENT_1_CODE, period=49), "Loan period must be between 12 and 48 months."),
        (decision_payload(UNDERAGE_CODE), "Customer is underage and cannot receive a loan."),
        (
            decision_payload(SEGMENT_3_CODE, period=24, country="Latvia"),
            "Customer is too old to receive a loan for this period.",
        ),
    ],
)
def test_decision_endpoint_bad_request(client: TestClient, payload: dict, message: str):
    """Test invalid input and age rejections map to 400"""
    response = client.post("/v1/loan/decision", json=payload)

    assert response.status_code == 400
    data = response.json()
    assert data["approved_amount"] is None
    assert data["approved_period"] is None
    assert data["error_message"] == message


def test_decision_endpoint_debtor_not_found(client: TestClient):
    """Test debt segment maps to 404"""
    response = client.post("/v1/loan/decision", json=decision_payload(DEBTOR_CODE))

    assert response.status_code == 404
    assert response.json()["error_message"] == "Loan denied due to existing debt."


def test_decision_endpoint_no_period_found(client: TestClient):
    response = client.post("/v1/loan/decision", json=decision_payload(SEGMENT_1_CODE, amount=10000, period=48))

    assert response.status_code == 404
    assert response.json()["error_message"] == "No valid loan found within the allowed period."


def test_decision_endpoint_unexpected_error(client: TestClient, monkeypatch: pytest.MonkeyPatch):
    """Test unanticipated failures map to 500"""

    def broken_evaluate(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(decision_module, "evaluate", broken_evaluate)

    response = client.post("/v1/loan/decision", json=decision_payload(SEGMENT_2_CODE))

    assert response.status_code == 500
    assert response.json()["error_message"] == "An unexpected error occurred"


def test_decision_endpoint_schema_validation(client: TestClient):
    """Test missing fields are rejected by request validation"""
    response = client.post("/v1/loan/decision", json={"identity_code": SEGMENT_2_CODE, "loan_amount": 4000})
    assert response.status_code == 422

    response = client.post("/v1/loan/decision", json=decision_payload(""))
    assert response.status_code == 422


def test_app_metadata_from_settings():
    app = create_app()
    assert app.title == settings.app_title
    assert app.version == settings.app_version


def test_metrics_use_route_template_labels(client: TestClient):
    """Test latency histogram is labelled by matched route, not raw path"""
    client.post("/v1/loan/decision", json=decision_payload(SEGMENT_2_CODE))
    client.get("/no-such-path-4711")

    response = client.get("/metrics")
    assert 'endpoint="/v1/loan/decision"' in response.text
    assert 'endpoint="unmatched"' in response.text
    assert "no-such-path-4711" not in response.text


def internal_error_records(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [r for r in caplog.records if getattr(r, "outcome", None) == "internal_error"]


def test_decision_endpoint_unexpected_error_logs_outcome(
    client: TestClient,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
):
    """Test 500 path writes a decision record with outcome, duration and masked code"""

    def broken_evaluate(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(decision_module, "evaluate", broken_evaluate)

    with caplog.at_level(logging.INFO):
        response = client.post(
            "/v1/loan/decision",
            json=decision_payload(SEGMENT_2_CODE),
            headers={"X-Request-ID": "req-500"},
        )

    assert response.status_code == 500
    records = internal_error_records(caplog)
    assert len(records) == 1
    assert records[0].levelno == logging.ERROR
    assert records[0].request_id == "req-500"
    assert records[0].identity_code == "*******6610"
    assert records[0].duration_ms >= 0


def test_decision_endpoint_decision_fault(
    client: TestClient,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
):
    """Test DecisionFaultError maps to 500 and keeps the chained cause in the error log"""

    def faulty_evaluate(*args, **kwargs):
        try:
            1 / 0
        except ZeroDivisionError as e:
            raise DecisionFaultError("Decision evaluation failed: division by zero") from e

    monkeypatch.setattr(decision_module, "evaluate", faulty_evaluate)

    with caplog.at_level(logging.INFO):
        response = client.post("/v1/loan/decision", json=decision_payload(SEGMENT_2_CODE))

    assert response.status_code == 500
    assert response.json()["error_message"] == "An unexpected error occurred"
    assert len(internal_error_records(caplog)) == 1

    fault_records = [r for r in caplog.records if r.getMessage().startswith("Decision fault:")]
    assert len(fault_records) == 1
    assert isinstance(fault_records[0].exc_info[1].__cause__, ZeroDivisionError)
