"""
Payment-specific exceptions for PayPal operations.

This module provides a hierarchy of exceptions for the PayPal gateway,
including payment domain errors and PayPal-specific errors translated
from the paypalrestsdk failures.

Exception Hierarchy:
    PaymentError (base for payment domain)
    ├── PaymentValidationError - Payment validation failures
    │   └── PayPalValidationError - Invalid input to the PayPal component
    └── PaymentProcessingError - Payment processing failures
        └── PayPalError - Base for all PayPal errors
            ├── PayPalConfigurationError - Bad credentials/config (fatal)
            ├── PayPalAuthenticationError - OAuth rejected (permanent)
            ├── PayPalCardDeclinedError - Card refused (permanent)
            ├── PayPalInsufficientFundsError - Insufficient funds (permanent)
            ├── PayPalInvalidRequestError - Invalid request (permanent)
            ├── PayPalPaymentStateError - Payment not executable (permanent)
            ├── PayPalPaymentNotFoundError - Unknown payment id (permanent)
            ├── PayPalAPIUnavailableError - API unavailable (transient, retry)
            └── PayPalTimeoutError - Request timeout (transient, retry)

Usage:
    from paypal_gateway.exceptions import PayPalError, PayPalCardDeclinedError

    try:
        get_paypal().pay_card(card, total="10.00")
    except PayPalCardDeclinedError as e:
        return Response(e.to_dict(), status=402)
    except PayPalError as e:
        if e.is_retryable:
            schedule_retry()
        raise
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.exceptions import BaseApplicationError

if TYPE_CHECKING:
    from typing import Any


# =============================================================================
# Payment Domain Exceptions
# =============================================================================


class PaymentError(BaseApplicationError):
    """
    Base exception for all payment operations.

    All payment-specific exceptions inherit from this class,
    which itself inherits from BaseApplicationError for
    consistent API error responses.
    """

    default_error_code: str = "PAYMENT_ERROR"


class PaymentValidationError(PaymentError):
    """
    Raised when payment validation fails.

    Use for:
    - Invalid payment amount
    - Invalid currency
    - Missing required fields
    """

    default_error_code: str = "PAYMENT_VALIDATION_ERROR"


class PaymentProcessingError(PaymentError):
    """
    Raised when payment processing fails.

    Use for:
    - Payment provider API errors
    - Payment gateway failures
    - Processing timeouts
    """

    default_error_code: str = "PAYMENT_PROCESSING_ERROR"


class PayPalValidationError(PaymentValidationError):
    """
    Input rejected by the PayPal component before any API call.

    Example:
        if total <= 0:
            raise PayPalValidationError(
                "Payment total must be positive",
                details={"total": str(total)},
            )
    """

    default_error_code: str = "PAYPAL_VALIDATION_ERROR"


# =============================================================================
# PayPal-Specific Exceptions
# =============================================================================


class PayPalError(PaymentProcessingError):
    """
    Base exception for all PayPal-related errors.

    Provides common attributes for PayPal error handling:
    - paypal_name: PayPal's error name (e.g. VALIDATION_ERROR)
    - debug_id: PayPal-Debug-Id to quote to PayPal support
    - is_retryable: Whether the operation can be retried

    Example:
        try:
            get_paypal().execute_payment(payment_id, payer_id)
        except PayPalError as e:
            if e.is_retryable:
                schedule_retry(e)
            else:
                notify_user_permanent_failure(e)
    """

    default_error_code: str = "PAYPAL_ERROR"
    is_retryable: bool = False

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        paypal_name: str | None = None,
        debug_id: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = dict(details or {})
        if paypal_name:
            details["paypal_name"] = paypal_name
        if debug_id:
            details["debug_id"] = debug_id
        super().__init__(message, error_code=error_code, details=details)
        self.paypal_name = paypal_name
        self.debug_id = debug_id


# -----------------------------------------------------------------------------
# Permanent Errors (do not retry)
# -----------------------------------------------------------------------------


class PayPalConfigurationError(PayPalError):
    """
    The PayPal component is misconfigured.

    Raised at construction time for missing credentials, an unknown
    mode, or a log file that cannot be created. This is fatal: the
    component cannot be used until settings are fixed.

    Example:
        raise PayPalConfigurationError(
            "/var/log/app/paypal.log for paypal not created!",
            details={"log_file": "/var/log/app/paypal.log"},
        )
    """

    default_error_code: str = "PAYPAL_CONFIGURATION_ERROR"


class PayPalAuthenticationError(PayPalError):
    """
    PayPal rejected the client credentials or access token.

    Operational issue: check PAYPAL_CLIENT_ID / PAYPAL_CLIENT_SECRET
    and that the mode (sandbox/live) matches the credentials.
    """

    default_error_code: str = "PAYPAL_AUTHENTICATION_ERROR"


class PayPalCardDeclinedError(PayPalError):
    """
    The credit card was refused.

    Common PayPal names:
    - CREDIT_CARD_REFUSED
    - CREDIT_CARD_CVV_CHECK_FAILED
    - EXPIRED_CREDIT_CARD
    - INSTRUMENT_DECLINED
    """

    default_error_code: str = "CARD_DECLINED"


class PayPalInsufficientFundsError(PayPalError):
    """
    Insufficient funds on the funding instrument.

    Separate from PayPalCardDeclinedError for clearer user messaging.
    User action is required before a retry can succeed.
    """

    default_error_code: str = "INSUFFICIENT_FUNDS"


class PayPalInvalidRequestError(PayPalError):
    """
    PayPal rejected the request as invalid.

    Check details["paypal_details"] for the per-field issues
    PayPal reported (VALIDATION_ERROR responses).
    """

    default_error_code: str = "INVALID_PAYPAL_REQUEST"


class PayPalPaymentStateError(PayPalError):
    """
    The payment cannot be executed in its current state.

    Raised for PAYMENT_ALREADY_DONE, PAYMENT_NOT_APPROVED_FOR_EXECUTION
    and similar: the payer has not approved yet, or execution already ran.
    """

    default_error_code: str = "PAYPAL_PAYMENT_STATE_ERROR"


class PayPalPaymentNotFoundError(PayPalError):
    """No payment exists for the given payment id."""

    default_error_code: str = "PAYPAL_PAYMENT_NOT_FOUND"


# -----------------------------------------------------------------------------
# Transient Errors (safe to retry with backoff)
# -----------------------------------------------------------------------------


class PayPalAPIUnavailableError(PayPalError):
    """
    PayPal API is temporarily unavailable.

    This covers:
    - Network connectivity issues
    - PayPal server errors (5xx)

    Payment creation carries a PayPal-Request-Id, so a retried
    create is de-duplicated by PayPal.
    """

    default_error_code: str = "PAYPAL_UNAVAILABLE"
    is_retryable: bool = True


class PayPalTimeoutError(PayPalError):
    """
    PayPal API call timed out.

    The request was sent but no response arrived within
    http.ConnectionTimeOut seconds. The operation may have
    succeeded on PayPal's side; look the payment up before
    creating a new one.
    """

    default_error_code: str = "PAYPAL_TIMEOUT"
    is_retryable: bool = True


def is_retryable_paypal_error(error: Exception) -> bool:
    """
    Check if an error is a transient PayPal error that can be retried.

    Args:
        error: The exception to check

    Returns:
        True if the error is a retryable PayPalError
    """
    if isinstance(error, PayPalError):
        return getattr(error, "is_retryable", False)
    return False


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Payment domain
    "PaymentError",
    "PaymentValidationError",
    "PaymentProcessingError",
    # PayPal-specific
    "PayPalValidationError",
    "PayPalError",
    "PayPalConfigurationError",
    "PayPalAuthenticationError",
    "PayPalCardDeclinedError",
    "PayPalInsufficientFundsError",
    "PayPalInvalidRequestError",
    "PayPalPaymentStateError",
    "PayPalPaymentNotFoundError",
    "PayPalAPIUnavailableError",
    "PayPalTimeoutError",
    "is_retryable_paypal_error",
]
