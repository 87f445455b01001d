"""
Payment adapters for external services.

This module provides the adapter for the PayPal REST API.
All PayPal calls should go through PayPalAdapter to ensure
consistent configuration, error handling and observability.

Usage:
    from paypal_gateway.adapters import PayPalAdapter, CreditCardParams

    result = PayPalAdapter(client_id, client_secret).pay_card(
        CreditCardParams(
            card_type="visa",
            number="4417119669820331",
            expire_month=11,
            expire_year=2030,
            first_name="Joe",
            last_name="Shopper",
        ),
        total="7.47",
    )
"""

from paypal_gateway.adapters.api_context import ConfiguredApi
from paypal_gateway.adapters.paypal_adapter import (
    CreditCardParams,
    PaymentResult,
    PayPalAdapter,
    RedirectUrls,
    format_amount,
    merge_config,
)

__all__ = [
    "ConfiguredApi",
    "CreditCardParams",
    "PaymentResult",
    "PayPalAdapter",
    "RedirectUrls",
    "format_amount",
    "merge_config",
]
