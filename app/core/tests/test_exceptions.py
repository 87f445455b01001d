"""
Tests for the base application exception.
"""

import pytest

from core.exceptions import BaseApplicationError


class TestBaseApplicationError:
    """Tests for BaseApplicationError."""

    def test_defaults(self):
        error = BaseApplicationError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "APPLICATION_ERROR"
        assert error.details == {}

    def test_to_dict_without_details(self):
        error = BaseApplicationError("Something went wrong", error_code="BROKEN")

        assert error.to_dict() == {"error": "Something went wrong", "error_code": "BROKEN"}

    def test_to_dict_with_details(self):
        error = BaseApplicationError(
            "Payment could not be created",
            error_code="PAYMENT_FAILED",
            details={"payment_id": "PAY-123"},
        )

        assert error.to_dict() == {
            "error": "Payment could not be created",
            "error_code": "PAYMENT_FAILED",
            "details": {"payment_id": "PAY-123"},
        }

    def test_str_includes_code(self):
        assert str(BaseApplicationError("Nope", error_code="DENIED")) == "[DENIED] Nope"

    def test_repr(self):
        error = BaseApplicationError("Nope", error_code="DENIED")

        assert repr(error) == (
            "BaseApplicationError(message='Nope', error_code='DENIED', details={})"
        )

    def test_subclass_default_code(self):
        class OrderError(BaseApplicationError):
            default_error_code = "ORDER_ERROR"

        with pytest.raises(BaseApplicationError) as exc_info:
            raise OrderError("Order failed")

        assert exc_info.value.error_code == "ORDER_ERROR"
