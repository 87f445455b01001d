"""
Authenticated API context for the PayPal REST SDK.

ConfiguredApi is the paypalrestsdk.Api the adapter hands to every
Payment call. On top of the SDK's OAuth client-credentials exchange it
applies the transport settings from the component config:

- http.ConnectionTimeOut: per-request timeout in seconds
- http.Retry: extra attempts for transport failures and
  HTTP 408/502/503/504 responses

Retried POSTs reuse the PayPal-Request-Id header the SDK attaches to
each resource, so PayPal treats them as the same request.
"""

from __future__ import annotations

import logging
from typing import Any

import paypalrestsdk
import requests
from paypalrestsdk import exceptions as paypal_exceptions

from paypal_gateway.constants import RETRYABLE_HTTP_STATUSES

logger = logging.getLogger(__name__)


def _is_retryable_transport_error(error: Exception) -> bool:
    """Return True for failures the API context retries."""
    if isinstance(error, (requests.exceptions.ConnectionError, requests.exceptions.Timeout)):
        return True
    if isinstance(error, paypal_exceptions.ConnectionError):
        response = getattr(error, "response", None)
        status_code = getattr(response, "status_code", None)
        return status_code in RETRYABLE_HTTP_STATUSES
    return False


class ConfiguredApi(paypalrestsdk.Api):
    """
    paypalrestsdk.Api with request timeout and transport retries.

    Args:
        options: SDK options (mode, client_id, client_secret, ...)
        connection_timeout: Seconds before a request times out (None: no limit)
        retries: Extra attempts after a retryable failure
        cache_token: Keep the OAuth access token between calls
    """

    def __init__(
        self,
        options: dict[str, Any] | None = None,
        connection_timeout: float | None = None,
        retries: int = 0,
        cache_token: bool = True,
        **kwargs: Any,
    ):
        super().__init__(options, **kwargs)
        self.connection_timeout = connection_timeout
        self.retries = max(int(retries), 0)
        self.cache_token = cache_token

    def request(self, url, method, body=None, headers=None, refresh_token=None):
        if not self.cache_token:
            # Forces a fresh client-credentials exchange for this call
            self.token_hash = None
        return super().request(
            url, method, body=body, headers=headers, refresh_token=refresh_token
        )

    def http_call(self, url, method, **kwargs):
        if self.connection_timeout is not None:
            kwargs.setdefault("timeout", self.connection_timeout)

        attempt = 0
        while True:
            try:
                return super().http_call(url, method, **kwargs)
            except Exception as e:
                if attempt >= self.retries or not _is_retryable_transport_error(e):
                    raise
                attempt += 1
                logger.warning(
                    "Retrying PayPal request",
                    extra={
                        "method": method,
                        "url": url,
                        "attempt": attempt,
                        "max_retries": self.retries,
                        "error": type(e).__name__,
                    },
                )
