"""
Django signals for the PayPal gateway.

Provides handlers for:
- Rebuilding the PayPal component when its settings change
"""

from __future__ import annotations

import logging

from django.test.signals import setting_changed

logger = logging.getLogger(__name__)

# Settings read by paypal_gateway.component.build_paypal()
COMPONENT_SETTINGS = frozenset(
    {
        "PAYPAL_CLIENT_ID",
        "PAYPAL_CLIENT_SECRET",
        "PAYPAL_CURRENCY",
        "PAYPAL_CONFIG",
        "PAYPAL_RETURN_URL",
        "PAYPAL_CANCEL_URL",
        "DEBUG",
        "LOG_DIR",
    }
)


def connect_signals():
    """
    Connect all signal handlers.

    Called from PayPalGatewayConfig.ready().
    """
    setting_changed.connect(
        reset_paypal_on_setting_change,
        dispatch_uid="paypal_gateway_setting_changed",
    )

    logger.debug("PayPal gateway signals connected")


def reset_paypal_on_setting_change(sender, setting: str, **kwargs) -> None:
    """
    Drop the shared PayPal component when one of its settings changes.

    Args:
        sender: Settings wrapper class.
        setting: Name of the changed setting.
        **kwargs: value, enter and other signal arguments.
    """
    if setting not in COMPONENT_SETTINGS:
        return

    from paypal_gateway.component import reset_paypal

    reset_paypal()
    logger.debug(f"PayPal component reset after {setting} changed")
