"""
DRF serializers for the PayPal gateway.

This module provides serializers for:
- Card payment and redirect payment requests
- Payment execution requests
- Payment results returned by PayPalAdapter

Related files:
    - adapters/paypal_adapter.py: CreditCardParams, PaymentResult
    - views.py: PayPal API views

Usage:
    serializer = CardPaymentSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    card = serializer.to_card_params()
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from paypal_gateway.adapters import CreditCardParams


class CreditCardSerializer(serializers.Serializer):
    """
    Credit card fields for a card payment.

    The card number is write-only and never echoed back.
    """

    card_type = serializers.ChoiceField(
        choices=["visa", "mastercard", "amex", "discover", "maestro"]
    )
    number = serializers.RegexField(r"^[0-9 ]{12,23}$", write_only=True)
    expire_month = serializers.IntegerField(min_value=1, max_value=12)
    expire_year = serializers.IntegerField(min_value=2000, max_value=2100)
    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    cvv2 = serializers.RegexField(
        r"^[0-9]{3,4}$", required=False, allow_blank=True, write_only=True
    )


class PaymentAmountSerializer(serializers.Serializer):
    """Total and description shared by both payment requests."""

    total = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0.01")
    )
    description = serializers.CharField(
        max_length=127, required=False, allow_blank=True, default=""
    )


class CardPaymentSerializer(PaymentAmountSerializer):
    """
    Request body for POST card/.

    Example:
        {
            "card": {
                "card_type": "visa",
                "number": "4417119669820331",
                "expire_month": 11,
                "expire_year": 2030,
                "first_name": "Joe",
                "last_name": "Shopper"
            },
            "total": "7.47",
            "description": "Order #1042"
        }
    """

    card = CreditCardSerializer()

    def to_card_params(self) -> CreditCardParams:
        """Build CreditCardParams from validated data."""
        card = dict(self.validated_data["card"])
        if not card.get("cvv2"):
            card.pop("cvv2", None)
        return CreditCardParams(**card)


class RedirectPaymentSerializer(PaymentAmountSerializer):
    """
    Request body for POST redirect/.

    return_url and cancel_url are optional; the component falls
    back to PAYPAL_RETURN_URL / PAYPAL_CANCEL_URL.
    """

    return_url = serializers.URLField(required=False)
    cancel_url = serializers.URLField(required=False)

    def to_redirect_urls(self) -> dict[str, str]:
        """Redirect URLs present in the request."""
        return {
            key: self.validated_data[key]
            for key in ("return_url", "cancel_url")
            if self.validated_data.get(key)
        }


class ExecutePaymentSerializer(serializers.Serializer):
    """Request body for POST execute/."""

    payment_id = serializers.CharField(max_length=64)
    payer_id = serializers.CharField(max_length=64)


class PaymentResultSerializer(serializers.Serializer):
    """
    PaymentResult serializer for API responses.

    raw_response is not exposed; it can include funding
    instrument details.
    """

    id = serializers.CharField(read_only=True)
    state = serializers.CharField(read_only=True)
    intent = serializers.CharField(read_only=True, allow_null=True)
    payment_method = serializers.CharField(read_only=True, allow_null=True)
    total = serializers.CharField(read_only=True, allow_null=True)
    currency = serializers.CharField(read_only=True, allow_null=True)
    approval_url = serializers.URLField(read_only=True, allow_null=True)
    payer_id = serializers.CharField(read_only=True, allow_null=True)


__all__ = [
    "CardPaymentSerializer",
    "CreditCardSerializer",
    "ExecutePaymentSerializer",
    "PaymentResultSerializer",
    "RedirectPaymentSerializer",
]
