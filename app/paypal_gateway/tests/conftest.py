"""
Test configuration and fixtures for PayPal gateway tests.

This module provides:
- API client helpers for authenticated requests
- A mocked PayPal component for view tests
- PaymentResult test data

Usage:
    def test_example(authenticated_client, mock_paypal, payment_result):
        mock_paypal.get_payment.return_value = payment_result()
        response = authenticated_client.get("/api/v1/payments/paypal/payments/PAY-1/")
        assert response.status_code == 200
"""

from unittest.mock import MagicMock, patch

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from paypal_gateway.adapters import PaymentResult


# =============================================================================
# User and Client Fixtures
# =============================================================================


@pytest.fixture
def user(db, django_user_model):
    """Create a basic user."""
    return django_user_model.objects.create_user(
        username="buyer", email="buyer@example.com", password="TestPass123!"
    )


@pytest.fixture
def api_client():
    """Unauthenticated API client for public endpoints."""
    return APIClient()


@pytest.fixture
def authenticated_client(user):
    """API client authenticated with JWT token for the default user fixture."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {refresh.access_token}")
    return client


# =============================================================================
# PayPal Fixtures
# =============================================================================


@pytest.fixture
def mock_paypal():
    """Mock PayPal component returned by get_paypal() in views."""
    paypal = MagicMock(name="PayPalAdapter")
    with patch("paypal_gateway.views.get_paypal", return_value=paypal):
        yield paypal


@pytest.fixture
def payment_result():
    """Create a PaymentResult."""

    def _create(**kwargs) -> PaymentResult:
        defaults = {
            "id": "PAY-1B56960729604235TKQQIYVY",
            "state": "created",
            "intent": "sale",
            "payment_method": "paypal",
            "total": "7.47",
            "currency": "USD",
            "approval_url": "https://www.sandbox.paypal.com/cgi-bin/webscr?cmd=_express-checkout&token=EC-60U79048BN7719609",
            "payer_id": None,
            "raw_response": {"id": "PAY-1B56960729604235TKQQIYVY"},
        }
        defaults.update(kwargs)
        return PaymentResult(**defaults)

    return _create


@pytest.fixture
def card_payload():
    """Request body for POST card/."""
    return {
        "card": {
            "card_type": "visa",
            "number": "4417119669820331",
            "expire_month": 11,
            "expire_year": 2030,
            "first_name": "Joe",
            "last_name": "Shopper",
        },
        "total": "7.47",
        "description": "Order #1042",
    }


@pytest.fixture
def paypal_settings(settings, tmp_path):
    """
    Complete PayPal settings.

    Assigning through pytest-django's settings fixture sends
    setting_changed, so the shared component is rebuilt.
    """
    settings.PAYPAL_CLIENT_ID = "test-client-id"
    settings.PAYPAL_CLIENT_SECRET = "test-client-secret"
    settings.PAYPAL_CURRENCY = "USD"
    settings.PAYPAL_CONFIG = {"mode": "sandbox", "http.Retry": 0}
    settings.LOG_DIR = tmp_path
    settings.DEBUG = False
    return settings
