"""
Tests for the process-wide PayPal component.

Tests cover:
- Building the adapter from Django settings
- Singleton access through get_paypal()
- Rebuild after settings change
"""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

import pytest

from paypal_gateway.adapters import PayPalAdapter
from paypal_gateway.component import build_paypal, get_paypal, reset_paypal
from paypal_gateway.exceptions import PayPalConfigurationError


class TestBuildPaypal:
    """Tests for build_paypal."""

    def test_builds_adapter_from_settings(self, paypal_settings, tmp_path):
        paypal_settings.PAYPAL_CURRENCY = "eur"
        paypal_settings.PAYPAL_CONFIG = {"mode": "live", "http.ConnectionTimeOut": 10}

        paypal = build_paypal()

        assert isinstance(paypal, PayPalAdapter)
        assert paypal.client_id == "test-client-id"
        assert paypal.currency == "EUR"
        assert paypal.mode == "live"
        assert paypal.api_context.connection_timeout == 10.0
        assert paypal.config["log.FileName"] == str(tmp_path / "paypal.log")

    def test_missing_credentials(self, paypal_settings):
        paypal_settings.PAYPAL_CLIENT_SECRET = ""

        with pytest.raises(PayPalConfigurationError):
            build_paypal()

    def test_debug_enables_sdk_log(self, paypal_settings, tmp_path):
        paypal_settings.DEBUG = True

        paypal = build_paypal()

        assert paypal.config["log.LogEnabled"] == 1
        assert (tmp_path / "paypal.log").exists()


class TestGetPaypal:
    """Tests for get_paypal / reset_paypal."""

    def test_returns_same_instance(self, paypal_settings):
        assert get_paypal() is get_paypal()

    def test_reset_drops_instance(self, paypal_settings):
        first = get_paypal()

        reset_paypal()

        assert get_paypal() is not first

    def test_rebuilt_after_settings_change(self, paypal_settings):
        """Should reflect new settings on the next access."""
        first = get_paypal()

        paypal_settings.PAYPAL_CURRENCY = "GBP"

        second = get_paypal()
        assert second is not first
        assert second.currency == "GBP"

    def test_unrelated_setting_keeps_instance(self, paypal_settings):
        first = get_paypal()

        paypal_settings.TIME_ZONE = "Europe/Paris"

        assert get_paypal() is first

    def test_built_once_across_threads(self):
        with patch(
            "paypal_gateway.component.build_paypal", return_value=MagicMock()
        ) as mock_build:
            with ThreadPoolExecutor(max_workers=8) as executor:
                instances = list(executor.map(lambda _: get_paypal(), range(16)))

        assert mock_build.call_count == 1
        assert all(instance is instances[0] for instance in instances)
