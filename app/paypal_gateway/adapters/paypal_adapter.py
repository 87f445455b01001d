"""
PayPal REST API adapter for payment operations.

This module provides the PayPalAdapter class which encapsulates all
PayPal API interactions. Each instance owns an authenticated API
context (client credentials) and a merged configuration map; every
payment call builds the PayPal request object graph and delegates to
paypalrestsdk.

Features:
- Configuration defaults merged with user config (user wins)
- SDK request tracing to a dedicated log file
- Automatic error translation to domain exceptions
- Structured logging with timing metrics

Configuration keys (config dict):
- mode: sandbox or live (default: sandbox)
- http.ConnectionTimeOut: request timeout in seconds (default: 30)
- http.Retry: extra attempts on transport failures (default: 1)
- log.LogEnabled: trace SDK traffic to log.FileName (default: DEBUG)
- log.FileName: SDK log file (default: LOG_DIR/paypal.log)
- log.LogLevel: FINE, INFO, WARN or ERROR (default: FINE)
- validation.level: log, strict or disable (default: log)
- cache.enabled: reuse the OAuth access token (default: "true")

Usage:
    from paypal_gateway.adapters import PayPalAdapter, CreditCardParams

    paypal = PayPalAdapter(client_id="...", client_secret="...")

    # Card payment, state is in the result
    result = paypal.pay_card(
        CreditCardParams(
            card_type="visa",
            number="4417119669820331",
            expire_month=11,
            expire_year=2030,
            first_name="Joe",
            last_name="Shopper",
        ),
        total="7.47",
        description="Order #1042",
    )

    # PayPal account payment, send the buyer to result.approval_url
    result = paypal.pay_paypal(
        {"return_url": "https://shop.example/paypal/return/"},
        total="7.47",
    )

    # After approval, PayPal redirects back with paymentId and PayerID
    result = paypal.execute_payment(payment_id, payer_id)
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import requests
from django.conf import settings
from paypalrestsdk import Payment
from paypalrestsdk import exceptions as paypal_exceptions

from paypal_gateway.adapters.api_context import ConfiguredApi
from paypal_gateway.constants import (
    APPROVAL_URL_REL,
    CARD_DECLINED_ERROR_NAMES,
    CONFIG_CACHE_ENABLED,
    CONFIG_CONNECTION_TIMEOUT,
    CONFIG_HTTP_RETRY,
    CONFIG_LOG_ENABLED,
    CONFIG_LOG_FILE_NAME,
    CONFIG_LOG_LEVEL,
    CONFIG_MODE,
    CONFIG_VALIDATION_LEVEL,
    DEFAULT_CANCEL_URL,
    DEFAULT_CURRENCY,
    DEFAULT_LOG_FILE_NAME,
    DEFAULT_RETURN_URL,
    INSUFFICIENT_FUNDS_ERROR_NAME,
    INTENT_SALE,
    LOG_LEVEL_FINE,
    LOG_LEVELS,
    MODE_LIVE,
    MODE_SANDBOX,
    MODES,
    PAYMENT_METHOD_CREDIT_CARD,
    PAYMENT_METHOD_PAYPAL,
    PAYMENT_STATE_ERROR_NAMES,
    SDK_LOGGER_NAME,
    VALIDATION_DISABLE,
    VALIDATION_LOG,
    VALIDATION_STRICT,
    ZERO_DECIMAL_CURRENCIES,
)
from paypal_gateway.exceptions import (
    PayPalAPIUnavailableError,
    PayPalAuthenticationError,
    PayPalCardDeclinedError,
    PayPalConfigurationError,
    PayPalInsufficientFundsError,
    PayPalInvalidRequestError,
    PayPalPaymentNotFoundError,
    PayPalPaymentStateError,
    PayPalTimeoutError,
    PayPalValidationError,
)
from paypal_gateway.log_filters import SensitiveDataFilter


# =============================================================================
# Data Types
# =============================================================================


# Historical component keys accepted by CreditCardParams.from_mapping
CARD_FIELD_ALIASES = {
    "cardType": "card_type",
    "type": "card_type",
    "cardNumber": "number",
    "expMonth": "expire_month",
    "expYear": "expire_year",
    "firstName": "first_name",
    "lastName": "last_name",
}


@dataclass
class CreditCardParams:
    """
    Credit card funding instrument for a card payment.

    Attributes:
        card_type: Card brand (visa, mastercard, amex, discover)
        number: Full card number
        expire_month: Expiry month (1-12)
        expire_year: Four digit expiry year
        first_name: Card holder first name
        last_name: Card holder last name
        cvv2: Optional card security code
    """

    card_type: str
    number: str
    expire_month: int
    expire_year: int
    first_name: str
    last_name: str
    cvv2: str | None = None

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        for name in ("card_type", "number", "first_name", "last_name"):
            if not getattr(self, name):
                raise PayPalValidationError(
                    f"{name} is required",
                    details={"field": name},
                )
        self.number = str(self.number).replace(" ", "")
        try:
            self.expire_month = int(self.expire_month)
            self.expire_year = int(self.expire_year)
        except (TypeError, ValueError):
            raise PayPalValidationError(
                "expire_month and expire_year must be integers",
                details={"field": "expire_month"},
            )
        if not 1 <= self.expire_month <= 12:
            raise PayPalValidationError(
                "expire_month must be between 1 and 12",
                details={"field": "expire_month", "value": self.expire_month},
            )

    @property
    def masked_number(self) -> str:
        """Card number reduced to its last four digits."""
        return f"****{self.number[-4:]}"

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        validation_level: str = VALIDATION_LOG,
    ) -> CreditCardParams:
        """
        Build card params from a dict.

        Accepts both snake_case field names and the camelCase keys
        (cardType, cardNumber, expMonth, expYear, firstName, lastName).

        Args:
            data: Card fields
            validation_level: What to do with unknown keys:
                strict raises, log warns, disable ignores

        Raises:
            PayPalValidationError: Missing fields, or unknown keys in strict mode
        """
        known = set(cls.__dataclass_fields__)
        values: dict[str, Any] = {}
        unknown: list[str] = []

        for key, value in data.items():
            name = CARD_FIELD_ALIASES.get(key, key)
            if name in known:
                values[name] = value
            else:
                unknown.append(key)

        if unknown and validation_level != VALIDATION_DISABLE:
            if validation_level == VALIDATION_STRICT:
                raise PayPalValidationError(
                    "Unknown credit card fields",
                    details={"unknown_fields": sorted(unknown)},
                )
            logging.getLogger(__name__).warning(
                "Ignoring unknown credit card fields",
                extra={"unknown_fields": sorted(unknown)},
            )

        missing = [
            name
            for name in cls.__dataclass_fields__
            if name not in values and name != "cvv2"
        ]
        if missing:
            raise PayPalValidationError(
                "Missing credit card fields",
                details={"missing_fields": missing},
            )

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """PayPal credit_card object."""
        card: dict[str, Any] = {
            "type": self.card_type,
            "number": self.number,
            "expire_month": self.expire_month,
            "expire_year": self.expire_year,
            "first_name": self.first_name,
            "last_name": self.last_name,
        }
        if self.cvv2:
            card["cvv2"] = self.cvv2
        return card


@dataclass
class RedirectUrls:
    """
    Where PayPal sends the buyer after approving or cancelling.

    Attributes:
        return_url: Approval landing page (receives paymentId and PayerID)
        cancel_url: Cancellation landing page
    """

    return_url: str = DEFAULT_RETURN_URL
    cancel_url: str = DEFAULT_CANCEL_URL

    def to_dict(self) -> dict[str, str]:
        return {"return_url": self.return_url, "cancel_url": self.cancel_url}


@dataclass
class PaymentResult:
    """
    Result from PayPal Payment operations.

    Attributes:
        id: Payment ID (PAY-xxx)
        state: created, approved, failed
        intent: sale, authorize or order
        payment_method: credit_card or paypal
        total: Amount of the first transaction
        currency: Currency of the first transaction
        approval_url: Buyer approval link (redirect payments only)
        payer_id: Payer ID once the payment is executed
        raw_response: Full PayPal response dict
    """

    id: str
    state: str
    intent: str | None = None
    payment_method: str | None = None
    total: str | None = None
    currency: str | None = None
    approval_url: str | None = None
    payer_id: str | None = None
    raw_response: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payment(cls, payment: Payment) -> PaymentResult:
        """Build a result from an SDK Payment resource."""
        data = payment.to_dict()
        payer = data.get("payer") or {}
        transactions = data.get("transactions") or [{}]
        amount = transactions[0].get("amount") or {}

        approval_url = None
        for link in data.get("links") or []:
            if link.get("rel") == APPROVAL_URL_REL:
                approval_url = link.get("href")
                break

        return cls(
            id=data.get("id"),
            state=data.get("state"),
            intent=data.get("intent"),
            payment_method=payer.get("payment_method"),
            total=amount.get("total"),
            currency=amount.get("currency"),
            approval_url=approval_url,
            payer_id=(payer.get("payer_info") or {}).get("payer_id"),
            raw_response=data,
        )


# =============================================================================
# Helpers
# =============================================================================


def merge_config(defaults: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """
    Recursively merge two config dicts, values in overrides winning.

    Nested dicts are merged key by key; any other value replaces the default.
    """
    merged = dict(defaults)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def is_truthy(value: Any) -> bool:
    """Interpret config flags such as 1, "1", "true", True."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def format_amount(total: Any, currency: str) -> str:
    """
    Format a payment total the way PayPal expects it.

    Args:
        total: Amount as str, int, float or Decimal
        currency: ISO 4217 code

    Returns:
        Decimal string, two fraction digits except for zero-decimal currencies

    Raises:
        PayPalValidationError: Total is not a number, is out of range,
            or is not positive once rounded to the currency
    """
    exponent = Decimal("1") if currency in ZERO_DECIMAL_CURRENCIES else Decimal("0.01")
    try:
        amount = Decimal(str(total))
    except (InvalidOperation, ValueError):
        raise PayPalValidationError(
            "Payment total must be a number",
            details={"total": str(total)},
        )
    try:
        amount = amount.quantize(exponent, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise PayPalValidationError(
            "Payment total is out of range",
            details={"total": str(total)},
        )
    if not amount.is_finite() or amount <= 0:
        raise PayPalValidationError(
            "Payment total must be positive",
            details={"total": str(total), "currency": currency},
        )

    return str(amount)


def resolve_log_file(file_name: str | Path) -> Path:
    """Expand ~ and anchor relative paths at BASE_DIR."""
    path = Path(file_name).expanduser()
    if not path.is_absolute():
        path = Path(getattr(settings, "BASE_DIR", Path.cwd())) / path
    return path


def ensure_log_file(path: Path) -> Path:
    """
    Create the log file (and its directory) if it does not exist.

    Raises:
        PayPalConfigurationError: The file cannot be created
    """
    if path.exists():
        return path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
    except OSError as e:
        raise PayPalConfigurationError(
            f"{path} for paypal not created!",
            details={"log_file": str(path), "error": str(e)},
        ) from e
    return path


def configure_sdk_logging(log_file: Path, level_name: str) -> logging.Handler:
    """
    Route paypalrestsdk's request/response log to log_file.

    A handler is attached once per file; later calls only adjust the level.
    The SDK logger stops propagating so its DEBUG traces only reach this
    handler, which redacts card data and credentials.
    """
    level = LOG_LEVELS.get(str(level_name).upper(), logging.DEBUG)
    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)

    for handler in sdk_logger.handlers:
        if getattr(handler, "baseFilename", None) == os.path.abspath(log_file):
            handler.setLevel(level)
            break
    else:
        handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(levelname)s %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handler.addFilter(SensitiveDataFilter())
        handler.setLevel(level)
        sdk_logger.addHandler(handler)

    if sdk_logger.level == logging.NOTSET or sdk_logger.level > level:
        sdk_logger.setLevel(level)
    sdk_logger.propagate = False
    return handler


# =============================================================================
# PayPal Adapter
# =============================================================================


class PayPalAdapter:
    """
    PayPal component: authenticated API context plus payment operations.

    One instance is built per process from Django settings by
    paypal_gateway.component.get_paypal(); it can also be constructed
    directly, e.g. for a second PayPal account.

    Args:
        client_id: REST app client id
        client_secret: REST app secret
        currency: ISO 4217 code used for all payments (default: USD)
        config: Overrides for the configuration defaults
        debug: Enables SDK logging by default (default: settings.DEBUG)
        log_dir: Directory of the default log file (default: settings.LOG_DIR)

    Raises:
        PayPalConfigurationError: Missing credentials, unknown mode,
            or a log file that cannot be created
    """

    MODE_SANDBOX = MODE_SANDBOX
    MODE_LIVE = MODE_LIVE

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        currency: str = DEFAULT_CURRENCY,
        config: Mapping[str, Any] | None = None,
        debug: bool | None = None,
        log_dir: str | Path | None = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.currency = currency
        self.config: dict[str, Any] = dict(config or {})
        self._debug = settings.DEBUG if debug is None else debug
        self._log_dir = Path(log_dir or getattr(settings, "LOG_DIR", Path.cwd() / "logs"))
        self._api_context: ConfiguredApi | None = None

        self._set_config()

    # =========================================================================
    # Configuration
    # =========================================================================

    def _set_config(self) -> ConfiguredApi:
        """Merge config defaults and build the authenticated API context."""
        if not self.client_id or not self.client_secret:
            raise PayPalConfigurationError(
                "PayPal client_id and client_secret are required",
                details={"client_id_set": bool(self.client_id)},
            )

        log_file = self._log_dir / DEFAULT_LOG_FILE_NAME
        if self.config.get(CONFIG_LOG_FILE_NAME) and is_truthy(
            self.config.get(CONFIG_LOG_ENABLED)
        ):
            log_file = ensure_log_file(resolve_log_file(self.config[CONFIG_LOG_FILE_NAME]))
            self.config[CONFIG_LOG_FILE_NAME] = str(log_file)

        self.config = merge_config(
            {
                CONFIG_MODE: MODE_SANDBOX,
                CONFIG_CONNECTION_TIMEOUT: 30,
                CONFIG_HTTP_RETRY: 1,
                CONFIG_LOG_ENABLED: 1 if self._debug else 0,
                CONFIG_LOG_FILE_NAME: str(log_file),
                CONFIG_LOG_LEVEL: LOG_LEVEL_FINE,
                CONFIG_VALIDATION_LEVEL: VALIDATION_LOG,
                CONFIG_CACHE_ENABLED: "true",
            },
            self.config,
        )

        mode = str(self.config[CONFIG_MODE]).lower()
        if mode not in MODES:
            raise PayPalConfigurationError(
                f"Unknown PayPal mode: {self.config[CONFIG_MODE]}",
                details={"mode": self.config[CONFIG_MODE], "allowed": list(MODES)},
            )
        self.config[CONFIG_MODE] = mode

        timeout = self.config.get(CONFIG_CONNECTION_TIMEOUT)
        self._api_context = ConfiguredApi(
            {
                "mode": mode,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
            },
            connection_timeout=float(timeout) if timeout else None,
            retries=int(self.config.get(CONFIG_HTTP_RETRY) or 0),
            cache_token=is_truthy(self.config.get(CONFIG_CACHE_ENABLED)),
        )

        if is_truthy(self.config.get(CONFIG_LOG_ENABLED)):
            sdk_log_file = ensure_log_file(resolve_log_file(self.config[CONFIG_LOG_FILE_NAME]))
            configure_sdk_logging(sdk_log_file, self.config[CONFIG_LOG_LEVEL])

        self.get_logger().debug(
            "PayPal component configured",
            extra={
                "mode": mode,
                "currency": self.currency,
                "log_enabled": is_truthy(self.config.get(CONFIG_LOG_ENABLED)),
            },
        )
        return self._api_context

    @property
    def api_context(self) -> ConfiguredApi:
        """Authenticated API context used for every call."""
        return self._api_context

    @property
    def mode(self) -> str:
        return self.config[CONFIG_MODE]

    @property
    def currency(self) -> str:
        """ISO 4217 code applied to every payment."""
        return self._currency

    @currency.setter
    def currency(self, value: str) -> None:
        code = str(value or "").strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise PayPalValidationError(
                "Currency must be a three-letter ISO 4217 code",
                details={"currency": value},
            )
        self._currency = code

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Get logger for this adapter."""
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    # =========================================================================
    # Request Builders
    # =========================================================================

    def _build_transaction(self, total: Any, description: str) -> dict[str, Any]:
        transaction: dict[str, Any] = {
            "amount": {
                "currency": self.currency,
                "total": format_amount(total, self.currency),
            }
        }
        if description:
            transaction["description"] = description
        return transaction

    def _build_redirect_urls(self, urls: RedirectUrls | Mapping[str, str] | None) -> RedirectUrls:
        if isinstance(urls, RedirectUrls):
            return urls
        urls = urls or {}
        return RedirectUrls(
            return_url=urls.get("return_url")
            or getattr(settings, "PAYPAL_RETURN_URL", "")
            or DEFAULT_RETURN_URL,
            cancel_url=urls.get("cancel_url")
            or getattr(settings, "PAYPAL_CANCEL_URL", "")
            or DEFAULT_CANCEL_URL,
        )

    # =========================================================================
    # Core Operations
    # =========================================================================

    def pay_card(
        self,
        card: CreditCardParams | Mapping[str, Any],
        total: Any,
        description: str = "",
    ) -> PaymentResult:
        """
        Run a card payment with PayPal.

        Args:
            card: Card params, or a dict of card fields
            total: Amount to charge in self.currency
            description: Optional transaction description

        Returns:
            PaymentResult; state tells whether the sale went through

        Raises:
            PayPalValidationError: Invalid card fields or total
            PayPalCardDeclinedError: Card was refused
            PayPalInvalidRequestError: PayPal rejected the request
            PayPalAPIUnavailableError: PayPal service unavailable
        """
        if not isinstance(card, CreditCardParams):
            card = CreditCardParams.from_mapping(
                card, validation_level=self.config[CONFIG_VALIDATION_LEVEL]
            )

        payment = Payment(
            {
                "intent": INTENT_SALE,
                "payer": {
                    "payment_method": PAYMENT_METHOD_CREDIT_CARD,
                    "funding_instruments": [{"credit_card": card.to_dict()}],
                },
                "transactions": [self._build_transaction(total, description)],
            },
            api=self._api_context,
        )

        return self._create(
            payment,
            {
                "operation": "pay_card",
                "card": card.masked_number,
                "card_type": card.card_type,
                "total": str(total),
                "currency": self.currency,
            },
        )

    def pay_paypal(
        self,
        urls: RedirectUrls | Mapping[str, str] | None = None,
        total: Any = 0,
        description: str = "",
    ) -> PaymentResult:
        """
        Create a payment the buyer approves on PayPal.

        Args:
            urls: return_url / cancel_url; missing ones fall back to
                PAYPAL_RETURN_URL / PAYPAL_CANCEL_URL settings
            total: Amount to charge in self.currency
            description: Optional transaction description

        Returns:
            PaymentResult whose approval_url the buyer must visit

        Raises:
            PayPalValidationError: Invalid total
            PayPalInvalidRequestError: PayPal rejected the request
            PayPalAPIUnavailableError: PayPal service unavailable
        """
        redirect_urls = self._build_redirect_urls(urls)

        payment = Payment(
            {
                "intent": INTENT_SALE,
                "payer": {"payment_method": PAYMENT_METHOD_PAYPAL},
                "redirect_urls": redirect_urls.to_dict(),
                "transactions": [self._build_transaction(total, description)],
            },
            api=self._api_context,
        )

        return self._create(
            payment,
            {
                "operation": "pay_paypal",
                "total": str(total),
                "currency": self.currency,
                "return_url": redirect_urls.return_url,
            },
        )

    def get_payment(self, payment_id: str) -> PaymentResult:
        """
        Retrieve a payment by ID.

        Raises:
            PayPalPaymentNotFoundError: Unknown payment id
        """
        log_context = {"operation": "get_payment", "payment_id": payment_id}
        logger = self.get_logger()

        start_time = time.time()
        logger.debug("Starting PayPal operation", extra=log_context)

        try:
            payment = self._find(payment_id)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self._handle_paypal_error(e, log_context, duration_ms)
            raise

        duration_ms = (time.time() - start_time) * 1000
        logger.debug(
            "PayPal operation completed",
            extra={**log_context, "state": payment.state, "duration_ms": duration_ms},
        )
        return PaymentResult.from_payment(payment)

    def execute_payment(self, payment_id: str, payer_id: str) -> PaymentResult:
        """
        Execute a previously approved payment.

        Args:
            payment_id: Payment ID returned by pay_paypal (paymentId)
            payer_id: Payer ID PayPal appended to the return URL (PayerID)

        Returns:
            PaymentResult of the executed payment

        Raises:
            PayPalValidationError: Missing payment or payer id
            PayPalPaymentNotFoundError: Unknown payment id
            PayPalPaymentStateError: Payment not approved or already executed
        """
        if not payment_id or not payer_id:
            raise PayPalValidationError(
                "payment_id and payer_id are required",
                details={"payment_id": payment_id, "payer_id": payer_id},
            )

        log_context = {
            "operation": "execute_payment",
            "payment_id": payment_id,
            "payer_id": payer_id,
        }
        logger = self.get_logger()

        start_time = time.time()
        logger.info("Starting PayPal operation", extra=log_context)

        try:
            payment = self._find(payment_id)
            executed = payment.execute({"payer_id": payer_id})
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self._handle_paypal_error(e, log_context, duration_ms)
            raise

        duration_ms = (time.time() - start_time) * 1000
        if not executed:
            self._raise_for_error_response(payment.error, log_context, duration_ms)

        logger.info(
            "PayPal operation completed",
            extra={**log_context, "state": payment.state, "duration_ms": duration_ms},
        )
        return PaymentResult.from_payment(payment)

    # =========================================================================
    # SDK Calls
    # =========================================================================

    def _find(self, payment_id: str) -> Payment:
        if not payment_id:
            raise PayPalValidationError("payment_id is required")
        return Payment.find(payment_id, api=self._api_context)

    def _create(self, payment: Payment, log_context: dict[str, Any]) -> PaymentResult:
        logger = self.get_logger()

        start_time = time.time()
        logger.info("Starting PayPal operation", extra=log_context)

        try:
            created = payment.create()
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self._handle_paypal_error(e, log_context, duration_ms)
            raise  # Never reached, but satisfies type checker

        duration_ms = (time.time() - start_time) * 1000
        if not created:
            self._raise_for_error_response(payment.error, log_context, duration_ms)

        logger.info(
            "PayPal operation completed",
            extra={
                **log_context,
                "payment_id": payment.id,
                "state": payment.state,
                "duration_ms": duration_ms,
            },
        )
        return PaymentResult.from_payment(payment)

    # =========================================================================
    # Error Handling
    # =========================================================================

    def _raise_for_error_response(
        self,
        error: Mapping[str, Any] | None,
        log_context: dict[str, Any],
        duration_ms: float,
    ) -> None:
        """
        Translate a PayPal error body (create/execute returned False).

        Raises:
            PayPalCardDeclinedError: Card refused
            PayPalInsufficientFundsError: Insufficient funds
            PayPalPaymentStateError: Payment not executable
            PayPalInvalidRequestError: Any other rejection
        """
        logger = self.get_logger()
        if hasattr(error, "to_dict"):
            error = error.to_dict()
        error = dict(error or {})
        name = error.get("name") or "UNKNOWN_ERROR"
        message = error.get("message") or "PayPal rejected the request"
        debug_id = error.get("debug_id")
        details: dict[str, Any] = {}
        if error.get("details"):
            details["paypal_details"] = error["details"]
        if error.get("information_link"):
            details["information_link"] = error["information_link"]

        logger.warning(
            "PayPal rejected request",
            extra={
                **log_context,
                "paypal_name": name,
                "debug_id": debug_id,
                "duration_ms": duration_ms,
            },
        )

        if name in CARD_DECLINED_ERROR_NAMES:
            exc_class = PayPalCardDeclinedError
        elif name == INSUFFICIENT_FUNDS_ERROR_NAME:
            exc_class = PayPalInsufficientFundsError
        elif name in PAYMENT_STATE_ERROR_NAMES:
            exc_class = PayPalPaymentStateError
        else:
            exc_class = PayPalInvalidRequestError

        raise exc_class(message, paypal_name=name, debug_id=debug_id, details=details)

    def _handle_paypal_error(
        self,
        error: Exception,
        log_context: dict[str, Any],
        duration_ms: float,
    ) -> None:
        """
        Translate paypalrestsdk and transport exceptions to domain exceptions.

        Domain exceptions raised by this module pass through unchanged.
        The original exception is chained as __cause__.

        Raises:
            PayPalPaymentNotFoundError: 404 from PayPal
            PayPalAuthenticationError: 401/403 from PayPal
            PayPalConfigurationError: SDK reported missing config
            PayPalInvalidRequestError: Other 4xx
            PayPalTimeoutError: Request timed out
            PayPalAPIUnavailableError: 5xx, network or unknown failure
        """
        logger = self.get_logger()
        log_context = {**log_context, "duration_ms": duration_ms}

        if isinstance(error, PayPalValidationError):
            raise error

        debug_id = self._debug_id(error)

        if isinstance(error, paypal_exceptions.ResourceNotFound):
            logger.warning("PayPal resource not found", extra=log_context)
            raise PayPalPaymentNotFoundError(
                "PayPal payment not found",
                paypal_name="RESOURCE_NOT_FOUND",
                debug_id=debug_id,
                details={"payment_id": log_context.get("payment_id")},
            ) from error

        elif isinstance(
            error,
            (paypal_exceptions.UnauthorizedAccess, paypal_exceptions.ForbiddenAccess),
        ):
            logger.critical(
                "PayPal authentication failed - check client credentials",
                extra=log_context,
            )
            raise PayPalAuthenticationError(
                "PayPal authentication failed",
                paypal_name="AUTHENTICATION_FAILURE",
                debug_id=debug_id,
            ) from error

        elif isinstance(error, paypal_exceptions.MissingConfig):
            logger.critical("PayPal SDK configuration missing", extra=log_context)
            raise PayPalConfigurationError(str(error)) from error

        elif isinstance(error, paypal_exceptions.ServerError):
            logger.error("PayPal server error", extra=log_context, exc_info=True)
            raise PayPalAPIUnavailableError(
                "PayPal service error. Please retry.",
                paypal_name="INTERNAL_SERVICE_ERROR",
                debug_id=debug_id,
            ) from error

        elif isinstance(error, paypal_exceptions.ClientError):
            logger.error("Invalid request to PayPal", extra=log_context)
            raise PayPalInvalidRequestError(
                str(error),
                debug_id=debug_id,
            ) from error

        elif isinstance(error, requests.exceptions.Timeout):
            logger.error("PayPal request timed out", extra=log_context)
            raise PayPalTimeoutError(
                "PayPal request timed out. Please retry.",
                details={"timeout": self.config.get(CONFIG_CONNECTION_TIMEOUT)},
            ) from error

        elif isinstance(
            error,
            (requests.exceptions.ConnectionError, paypal_exceptions.ConnectionError),
        ):
            logger.error("Connection error to PayPal", extra=log_context, exc_info=True)
            raise PayPalAPIUnavailableError(
                "Could not connect to PayPal. Please retry.",
                debug_id=debug_id,
            ) from error

        else:
            logger.error(
                f"Unexpected error from PayPal: {type(error).__name__}",
                extra=log_context,
                exc_info=True,
            )
            raise PayPalAPIUnavailableError(
                f"Unexpected PayPal error: {error}",
            ) from error

    @staticmethod
    def _debug_id(error: Exception) -> str | None:
        response = getattr(error, "response", None)
        headers = getattr(response, "headers", None) or {}
        try:
            return headers.get("PayPal-Debug-Id")
        except AttributeError:
            return None
