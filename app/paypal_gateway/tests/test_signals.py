"""
Tests for PayPal gateway signal handlers.
"""

from unittest.mock import patch

import pytest
from django.test.signals import setting_changed

from paypal_gateway.signals import COMPONENT_SETTINGS, reset_paypal_on_setting_change


class TestResetPaypalOnSettingChange:
    """Tests for reset_paypal_on_setting_change."""

    @pytest.mark.parametrize("setting", sorted(COMPONENT_SETTINGS))
    def test_component_setting_resets(self, setting):
        with patch("paypal_gateway.component.reset_paypal") as mock_reset:
            reset_paypal_on_setting_change(sender=None, setting=setting, value=None, enter=True)

        mock_reset.assert_called_once_with()

    def test_other_setting_ignored(self):
        with patch("paypal_gateway.component.reset_paypal") as mock_reset:
            reset_paypal_on_setting_change(sender=None, setting="TIME_ZONE", value="UTC", enter=True)

        mock_reset.assert_not_called()

    def test_connected_on_app_ready(self):
        """Should be registered when the app is loaded."""
        with patch("paypal_gateway.component.reset_paypal") as mock_reset:
            setting_changed.send(
                sender=None, setting="PAYPAL_CURRENCY", value="EUR", enter=True
            )

        mock_reset.assert_called_once_with()
