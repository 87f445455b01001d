"""
Constants for the PayPal gateway.

Modes, log levels and configuration keys understood by PayPalAdapter,
plus the request vocabulary of the PayPal Payments REST API.
"""

from __future__ import annotations

import logging

# =============================================================================
# Modes
# =============================================================================

MODE_SANDBOX = "sandbox"
MODE_LIVE = "live"

MODES = (MODE_SANDBOX, MODE_LIVE)

# =============================================================================
# SDK Log Levels
# =============================================================================

LOG_LEVEL_FINE = "FINE"
LOG_LEVEL_INFO = "INFO"
LOG_LEVEL_WARN = "WARN"
LOG_LEVEL_ERROR = "ERROR"

LOG_LEVELS = {
    LOG_LEVEL_FINE: logging.DEBUG,
    "DEBUG": logging.DEBUG,
    LOG_LEVEL_INFO: logging.INFO,
    LOG_LEVEL_WARN: logging.WARNING,
    "WARNING": logging.WARNING,
    LOG_LEVEL_ERROR: logging.ERROR,
}

# Logger used by paypalrestsdk for request/response tracing
SDK_LOGGER_NAME = "paypalrestsdk"

DEFAULT_LOG_FILE_NAME = "paypal.log"

# =============================================================================
# Configuration Keys
# =============================================================================

CONFIG_MODE = "mode"
CONFIG_CONNECTION_TIMEOUT = "http.ConnectionTimeOut"
CONFIG_HTTP_RETRY = "http.Retry"
CONFIG_LOG_ENABLED = "log.LogEnabled"
CONFIG_LOG_FILE_NAME = "log.FileName"
CONFIG_LOG_LEVEL = "log.LogLevel"
CONFIG_VALIDATION_LEVEL = "validation.level"
CONFIG_CACHE_ENABLED = "cache.enabled"

VALIDATION_LOG = "log"
VALIDATION_STRICT = "strict"
VALIDATION_DISABLE = "disable"

# =============================================================================
# Payments API Vocabulary
# =============================================================================

INTENT_SALE = "sale"
INTENT_AUTHORIZE = "authorize"
INTENT_ORDER = "order"

PAYMENT_METHOD_CREDIT_CARD = "credit_card"
PAYMENT_METHOD_PAYPAL = "paypal"

DEFAULT_CURRENCY = "USD"

DEFAULT_RETURN_URL = "https://devtools-paypal.com/guide/pay_paypal/php?success=true"
DEFAULT_CANCEL_URL = "https://devtools-paypal.com/guide/pay_paypal/php?success=true"

# PayPal rejects fractional amounts for these currencies
ZERO_DECIMAL_CURRENCIES = frozenset({"HUF", "JPY", "TWD"})

APPROVAL_URL_REL = "approval_url"

# HTTP statuses the API context retries when http.Retry > 0
RETRYABLE_HTTP_STATUSES = frozenset({408, 502, 503, 504})

# =============================================================================
# PayPal Error Names
# =============================================================================

CARD_DECLINED_ERROR_NAMES = frozenset(
    {
        "CREDIT_CARD_REFUSED",
        "CREDIT_CARD_CVV_CHECK_FAILED",
        "EXPIRED_CREDIT_CARD",
        "INSTRUMENT_DECLINED",
        "CARD_TOKEN_PAYER_MISMATCH",
    }
)

INSUFFICIENT_FUNDS_ERROR_NAME = "INSUFFICIENT_FUNDS"

PAYMENT_STATE_ERROR_NAMES = frozenset(
    {
        "PAYMENT_ALREADY_DONE",
        "PAYMENT_NOT_APPROVED_FOR_EXECUTION",
        "PAYMENT_STATE_INVALID",
        "PAYMENT_EXPIRED",
    }
)
