"""
Root pytest configuration for the Django project.

This module configures pytest-django and provides project-wide fixtures.
App-specific fixtures are defined in each app's tests/conftest.py.
"""

import logging
import os

import django
import pytest

# Ensure Django settings are configured before any tests run
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")


def pytest_configure():
    """Configure Django settings before tests run."""
    django.setup()

    from django.conf import settings

    # Disable throttling during tests to prevent rate limit failures
    settings.REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []
    settings.REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {}

    # Test client speaks plain HTTP
    settings.SECURE_SSL_REDIRECT = False


def pytest_collection_modifyitems(items):
    """
    Auto-mark tests based on filename patterns.

    Mapping:
    - test_views.py, test_component.py, test_signals.py → integration
    - test_exceptions.py, test_paypal_adapter.py, test_serializers.py → unit
    - Unmatched files → unit

    Explicit markers on test functions/classes take precedence.
    """
    integration_patterns = [
        "test_views.py",
        "test_component.py",
        "test_signals.py",
    ]

    for item in items:
        # Skip if test already has unit/integration/e2e marker
        existing_markers = {m.name for m in item.iter_markers()}
        if existing_markers & {"unit", "integration", "e2e"}:
            continue

        filename = str(item.fspath).split("/")[-1]

        if any(pattern in filename for pattern in integration_patterns):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def reset_paypal_component():
    """Drop the shared PayPal component around every test."""
    from paypal_gateway.component import reset_paypal

    reset_paypal()
    yield
    reset_paypal()


@pytest.fixture(autouse=True)
def clean_sdk_logger():
    """Remove file handlers the PayPal component attached to the SDK logger."""
    from paypal_gateway.constants import SDK_LOGGER_NAME

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    handlers = list(sdk_logger.handlers)
    level = sdk_logger.level
    propagate = sdk_logger.propagate
    yield
    for handler in sdk_logger.handlers:
        if handler not in handlers:
            handler.close()
    sdk_logger.handlers = handlers
    sdk_logger.setLevel(level)
    sdk_logger.propagate = propagate
