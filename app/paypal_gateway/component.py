"""
Process-wide PayPal component built from Django settings.

get_paypal() is the single access point for the configured
PayPalAdapter, the way other apps reach a registered component:

    from paypal_gateway.component import get_paypal

    result = get_paypal().pay_paypal(total="19.99")

Settings:
    PAYPAL_CLIENT_ID: REST app client id
    PAYPAL_CLIENT_SECRET: REST app secret
    PAYPAL_CURRENCY: ISO 4217 code (default: USD)
    PAYPAL_CONFIG: dict of config overrides (mode, http.*, log.*, ...)

The instance is dropped whenever one of these settings changes
(see paypal_gateway.signals), so override_settings in tests
yields a freshly configured component.
"""

from __future__ import annotations

import logging
import threading

from django.conf import settings

from paypal_gateway.adapters import PayPalAdapter
from paypal_gateway.constants import DEFAULT_CURRENCY

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_instance: PayPalAdapter | None = None


def build_paypal() -> PayPalAdapter:
    """
    Build a new PayPalAdapter from the current settings.

    Raises:
        PayPalConfigurationError: Settings are incomplete or invalid
    """
    return PayPalAdapter(
        client_id=getattr(settings, "PAYPAL_CLIENT_ID", ""),
        client_secret=getattr(settings, "PAYPAL_CLIENT_SECRET", ""),
        currency=getattr(settings, "PAYPAL_CURRENCY", DEFAULT_CURRENCY),
        config=getattr(settings, "PAYPAL_CONFIG", None) or {},
        debug=settings.DEBUG,
        log_dir=getattr(settings, "LOG_DIR", None),
    )


def get_paypal() -> PayPalAdapter:
    """Return the shared PayPalAdapter, building it on first access."""
    global _instance

    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = build_paypal()
                logger.info(
                    "PayPal component initialized",
                    extra={"mode": _instance.mode, "currency": _instance.currency},
                )
    return _instance


def reset_paypal() -> None:
    """Drop the shared instance; the next get_paypal() rebuilds it."""
    global _instance

    with _lock:
        _instance = None
