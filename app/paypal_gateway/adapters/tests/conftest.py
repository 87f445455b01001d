"""
Pytest fixtures for PayPal adapter tests.

This module provides fixtures for testing the PayPal adapter, including
mock PayPal Payment resources, SDK error conditions, and test data.

Sections:
    - Test Data Fixtures
    - Mock PayPal Response Fixtures
    - Mock PayPal Error Fixtures
"""

import logging
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from paypalrestsdk import exceptions as paypal_exceptions

from paypal_gateway.adapters import CreditCardParams, PayPalAdapter


# =============================================================================
# Test Data Fixtures
# =============================================================================


@pytest.fixture
def log_dir(tmp_path):
    """Directory for the default PayPal log file."""
    return tmp_path / "logs"


@pytest.fixture
def adapter(log_dir):
    """PayPalAdapter with SDK logging off."""
    return PayPalAdapter(
        client_id="test-client-id",
        client_secret="test-client-secret",
        debug=False,
        log_dir=log_dir,
    )


@pytest.fixture
def card_params():
    """Valid sandbox card."""
    return CreditCardParams(
        card_type="visa",
        number="4417119669820331",
        expire_month=11,
        expire_year=2030,
        first_name="Joe",
        last_name="Shopper",
    )


@pytest.fixture
def card_info():
    """Card dict using the component's camelCase keys."""
    return {
        "cardType": "visa",
        "cardNumber": "4417119669820331",
        "expMonth": "11",
        "expYear": "2030",
        "firstName": "Joe",
        "lastName": "Shopper",
    }


@pytest.fixture
def caplog_paypal(caplog):
    """caplog that also sees the paypal_gateway logger (propagate=False in LOGGING)."""
    app_logger = logging.getLogger("paypal_gateway")
    propagate = app_logger.propagate
    app_logger.propagate = True
    yield caplog
    app_logger.propagate = propagate


# =============================================================================
# Mock PayPal Response Fixtures
# =============================================================================


@pytest.fixture
def payment_data():
    """Create a PayPal Payment response dict."""

    def _create(
        id: str = "PAY-1B56960729604235TKQQIYVY",
        state: str = "created",
        payment_method: str = "paypal",
        total: str = "7.47",
        currency: str = "USD",
        approval_url: str | None = "https://www.sandbox.paypal.com/cgi-bin/webscr?cmd=_express-checkout&token=EC-60U79048BN7719609",
        payer_id: str | None = None,
    ) -> dict[str, Any]:
        payer: dict[str, Any] = {"payment_method": payment_method}
        if payer_id:
            payer["payer_info"] = {"payer_id": payer_id}

        links = [
            {
                "href": f"https://api.sandbox.paypal.com/v1/payments/payment/{id}",
                "rel": "self",
                "method": "GET",
            }
        ]
        if approval_url:
            links.append({"href": approval_url, "rel": "approval_url", "method": "REDIRECT"})

        return {
            "id": id,
            "intent": "sale",
            "state": state,
            "payer": payer,
            "transactions": [{"amount": {"total": total, "currency": currency}}],
            "links": links,
        }

    return _create


def make_payment_mock(data: dict[str, Any], error: Any = None) -> MagicMock:
    """Mock SDK Payment resource backed by data."""
    payment = MagicMock(name="Payment")
    payment.id = data.get("id")
    payment.state = data.get("state")
    payment.error = error
    payment.to_dict.return_value = data
    payment.create.return_value = error is None
    payment.execute.return_value = error is None
    return payment


@pytest.fixture
def mock_payment_class(payment_data):
    """
    Mock paypalrestsdk.Payment as seen by the adapter.

    Payment(...) returns mock.instance; Payment.find(...) returns mock.found.
    """
    with patch("paypal_gateway.adapters.paypal_adapter.Payment") as mock:
        mock.instance = make_payment_mock(payment_data())
        mock.found = make_payment_mock(payment_data())
        mock.return_value = mock.instance
        mock.find.return_value = mock.found
        yield mock


# =============================================================================
# Mock PayPal Error Fixtures
# =============================================================================


def make_http_response(status_code: int, reason: str = "", debug_id: str = "dbg-123"):
    """Mock requests.Response carried by SDK exceptions."""
    response = MagicMock(name="Response")
    response.status_code = status_code
    response.reason = reason
    response.headers = {"PayPal-Debug-Id": debug_id}
    return response


@pytest.fixture
def resource_not_found_error():
    return paypal_exceptions.ResourceNotFound(make_http_response(404, "Not Found"))


@pytest.fixture
def unauthorized_error():
    return paypal_exceptions.UnauthorizedAccess(make_http_response(401, "Unauthorized"))


@pytest.fixture
def server_error():
    return paypal_exceptions.ServerError(make_http_response(503, "Service Unavailable"))


@pytest.fixture
def client_error():
    return paypal_exceptions.ClientError(make_http_response(422, "Unprocessable Entity"))


@pytest.fixture
def error_body():
    """Create a PayPal error body as merged into Payment.error."""

    def _create(name: str = "VALIDATION_ERROR", message: str = "Invalid request"):
        return {
            "name": name,
            "message": message,
            "debug_id": "5b39a6d3f7a1c",
            "information_link": f"https://developer.paypal.com/docs/api/#{name.lower()}",
            "details": [{"field": "transactions[0].amount", "issue": "Invalid amount"}],
        }

    return _create
