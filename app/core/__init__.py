"""
Core Application - Infrastructure & Base Classes

Generic, reusable building blocks with no domain-specific logic.
Domain apps extend these classes.

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes

Usage:
    from core.exceptions import BaseApplicationError

    class PaymentError(BaseApplicationError):
        default_error_code = "PAYMENT_ERROR"
"""

from .exceptions import BaseApplicationError

__all__ = [
    "BaseApplicationError",
]
