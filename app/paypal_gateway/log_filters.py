"""
Logging filters for PayPal traffic.

In sandbox mode paypalrestsdk logs full request/response headers and
bodies at DEBUG. SensitiveDataFilter redacts card data and credentials
from those records before any handler writes them.

Usage (LOGGING dict):
    "filters": {
        "sensitive_data": {"()": "paypal_gateway.log_filters.SensitiveDataFilter"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "filters": ["sensitive_data"]},
    },
"""

from __future__ import annotations

import logging
import re


class SensitiveDataFilter(logging.Filter):
    """Filter to remove card data and credentials from logs."""

    # (pattern, replacement); patterns match both JSON bodies and str(dict) headers
    SENSITIVE_PATTERNS = [
        # Card number, last four digits kept
        (
            re.compile(r"""(["']number["']\s*:\s*["'])[0-9 ]*?([0-9]{4})(["'])""", re.IGNORECASE),
            r"\1****\2\3",
        ),
        (
            re.compile(r"""(["']cvv2["']\s*:\s*["'])[0-9]+(["'])""", re.IGNORECASE),
            r"\1***\2",
        ),
        # OAuth access token (API calls) and client credentials (token exchange)
        (re.compile(r"Bearer\s+[^\s\"',}]+", re.IGNORECASE), "Bearer [TOKEN_REDACTED]"),
        (re.compile(r"Basic\s+[A-Za-z0-9+/=]+", re.IGNORECASE), "Basic [CREDENTIALS_REDACTED]"),
        (
            re.compile(r"""(["'](?:access_token|refresh_token)["']\s*:\s*["'])[^"']*(["'])""", re.IGNORECASE),
            r"\1[REDACTED]\2",
        ),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact the formatted message; never drops the record."""
        record.msg = self.redact(record.getMessage())
        record.args = None
        return True

    @classmethod
    def redact(cls, text: str) -> str:
        for pattern, replacement in cls.SENSITIVE_PATTERNS:
            text = pattern.sub(replacement, text)
        return text
