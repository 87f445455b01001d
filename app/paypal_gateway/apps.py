"""
PayPal gateway app configuration.

This app wires the PayPal REST SDK into Django:
- PayPal component configured from settings
- Card and PayPal account payments
- Payment execution after buyer approval
"""

from django.apps import AppConfig


class PayPalGatewayConfig(AppConfig):
    """Configuration for the PayPal gateway application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "paypal_gateway"
    verbose_name = "PayPal Gateway"

    def ready(self) -> None:
        """Connect signal handlers when app is ready."""
        from paypal_gateway.signals import connect_signals

        connect_signals()
