"""
URL configuration for the Django application.

The `urlpatterns` list routes URLs to views. This is the root URL configuration
that includes all app-specific routes.

URL Structure:
    /                              - ReDoc API documentation
    /schema/                       - OpenAPI schema (YAML)
    /api/v1/payments/paypal/       - PayPal endpoints
        card/                      - Credit card payment (POST)
        redirect/                  - PayPal account payment (POST)
        execute/                   - Execute approved payment (POST)
        payments/{payment_id}/     - Payment details (GET)
        return/                    - PayPal approval redirect (GET)
        cancel/                    - PayPal cancel redirect (GET)

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView

# =============================================================================
# API v1 Routes
# =============================================================================
# All routes here are prefixed with /api/v1/ automatically
api_v1_patterns = [
    # Payments
    path("payments/paypal/", include("paypal_gateway.urls")),
]

urlpatterns = [
    # Documentation
    path("", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    # API v1
    path("api/v1/", include(api_v1_patterns)),
]
