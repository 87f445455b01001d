"""
DRF views for the PayPal gateway.

This module provides API views for:
- Credit card payments
- PayPal account (redirect) payments
- Payment execution and lookup
- PayPal's return/cancel redirects

Related files:
    - component.py: get_paypal()
    - serializers.py: Request/response serializers
    - urls.py: URL routing

Endpoints:
    POST /api/v1/payments/paypal/card/ - Pay with a credit card
    POST /api/v1/payments/paypal/redirect/ - Create a PayPal account payment
    POST /api/v1/payments/paypal/execute/ - Execute an approved payment
    GET /api/v1/payments/paypal/payments/{payment_id}/ - Get payment
    GET /api/v1/payments/paypal/return/ - PayPal approval redirect
    GET /api/v1/payments/paypal/cancel/ - PayPal cancel redirect

Security:
    - Payment endpoints require authentication
    - return/ and cancel/ are reached by the buyer's browser from PayPal
"""

from __future__ import annotations

import logging
from dataclasses import asdict

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from paypal_gateway.component import get_paypal
from paypal_gateway.exceptions import (
    PaymentError,
    PaymentValidationError,
    PayPalAPIUnavailableError,
    PayPalCardDeclinedError,
    PayPalInsufficientFundsError,
    PayPalInvalidRequestError,
    PayPalPaymentNotFoundError,
    PayPalPaymentStateError,
    PayPalTimeoutError,
)

from .serializers import (
    CardPaymentSerializer,
    ExecutePaymentSerializer,
    PaymentResultSerializer,
    RedirectPaymentSerializer,
)

logger = logging.getLogger(__name__)


# Most specific first; PaymentError itself falls through to 500
ERROR_STATUS_CODES = (
    (PaymentValidationError, status.HTTP_400_BAD_REQUEST),
    (PayPalInvalidRequestError, status.HTTP_400_BAD_REQUEST),
    (PayPalCardDeclinedError, status.HTTP_402_PAYMENT_REQUIRED),
    (PayPalInsufficientFundsError, status.HTTP_402_PAYMENT_REQUIRED),
    (PayPalPaymentNotFoundError, status.HTTP_404_NOT_FOUND),
    (PayPalPaymentStateError, status.HTTP_409_CONFLICT),
    (PayPalAPIUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (PayPalTimeoutError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def error_response(error: PaymentError) -> Response:
    """Render a payment domain error with its HTTP status."""
    for exc_class, status_code in ERROR_STATUS_CODES:
        if isinstance(error, exc_class):
            break
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return Response(error.to_dict(), status=status_code)


def result_response(result, status_code: int = status.HTTP_200_OK) -> Response:
    """Render a PaymentResult."""
    return Response(PaymentResultSerializer(asdict(result)).data, status=status_code)


class CardPaymentView(APIView):
    """
    Pay with a credit card.

    POST /api/v1/payments/paypal/card/

    Returns:
        201 with the created payment; state tells whether the sale went through
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="paypal_pay_card",
        summary="Pay with credit card",
        request=CardPaymentSerializer,
        responses={
            201: PaymentResultSerializer,
            402: OpenApiResponse(description="Card declined"),
        },
        tags=["Payments - PayPal"],
    )
    def post(self, request):
        serializer = CardPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            result = get_paypal().pay_card(
                serializer.to_card_params(),
                total=serializer.validated_data["total"],
                description=serializer.validated_data["description"],
            )
        except PaymentError as e:
            return error_response(e)

        return result_response(result, status.HTTP_201_CREATED)


class RedirectPaymentView(APIView):
    """
    Create a payment the buyer approves on PayPal.

    POST /api/v1/payments/paypal/redirect/

    Returns:
        201 with approval_url; redirect the buyer there
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="paypal_pay_paypal",
        summary="Create PayPal account payment",
        request=RedirectPaymentSerializer,
        responses={201: PaymentResultSerializer},
        tags=["Payments - PayPal"],
    )
    def post(self, request):
        serializer = RedirectPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            result = get_paypal().pay_paypal(
                serializer.to_redirect_urls(),
                total=serializer.validated_data["total"],
                description=serializer.validated_data["description"],
            )
        except PaymentError as e:
            return error_response(e)

        return result_response(result, status.HTTP_201_CREATED)


class ExecutePaymentView(APIView):
    """
    Execute a payment the buyer approved.

    POST /api/v1/payments/paypal/execute/
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="paypal_execute_payment",
        summary="Execute approved payment",
        request=ExecutePaymentSerializer,
        responses={
            200: PaymentResultSerializer,
            409: OpenApiResponse(description="Payment not approved or already executed"),
        },
        tags=["Payments - PayPal"],
    )
    def post(self, request):
        serializer = ExecutePaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            result = get_paypal().execute_payment(
                serializer.validated_data["payment_id"],
                serializer.validated_data["payer_id"],
            )
        except PaymentError as e:
            return error_response(e)

        return result_response(result)


class PaymentDetailView(APIView):
    """
    Get a payment.

    GET /api/v1/payments/paypal/payments/{payment_id}/
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="paypal_get_payment",
        summary="Get payment",
        responses={200: PaymentResultSerializer, 404: OpenApiResponse(description="Not found")},
        tags=["Payments - PayPal"],
    )
    def get(self, request, payment_id: str):
        try:
            result = get_paypal().get_payment(payment_id)
        except PaymentError as e:
            return error_response(e)

        return result_response(result)


class PayPalReturnView(APIView):
    """
    Landing page PayPal redirects the buyer to after approval.

    GET /api/v1/payments/paypal/return/?paymentId=PAY-xxx&token=EC-xxx&PayerID=xxx

    Executes the approved payment.
    """

    permission_classes = [AllowAny]

    @extend_schema(
        operation_id="paypal_return",
        summary="PayPal approval return",
        parameters=[
            OpenApiParameter(name="paymentId", type=str, required=True),
            OpenApiParameter(name="PayerID", type=str, required=True),
            OpenApiParameter(name="token", type=str, required=False),
        ],
        responses={200: PaymentResultSerializer},
        tags=["Payments - PayPal"],
    )
    def get(self, request):
        payment_id = request.query_params.get("paymentId", "")
        payer_id = request.query_params.get("PayerID", "")

        if not payment_id or not payer_id:
            logger.warning(
                "PayPal return without paymentId or PayerID",
                extra={"query": dict(request.query_params)},
            )
            return Response(
                {"detail": "paymentId and PayerID are required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            result = get_paypal().execute_payment(payment_id, payer_id)
        except PaymentError as e:
            return error_response(e)

        return result_response(result)


class PayPalCancelView(APIView):
    """
    Landing page PayPal redirects the buyer to after cancelling.

    GET /api/v1/payments/paypal/cancel/?token=EC-xxx
    """

    permission_classes = [AllowAny]

    @extend_schema(
        operation_id="paypal_cancel",
        summary="PayPal cancel return",
        parameters=[OpenApiParameter(name="token", type=str, required=False)],
        tags=["Payments - PayPal"],
    )
    def get(self, request):
        token = request.query_params.get("token")
        logger.info("PayPal payment cancelled by buyer", extra={"token": token})
        return Response({"status": "cancelled", "token": token})
