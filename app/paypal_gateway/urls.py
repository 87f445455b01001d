"""
URL configuration for the PayPal gateway app.

Routes:
    - POST card/ - Credit card payment
    - POST redirect/ - PayPal account payment
    - POST execute/ - Execute approved payment
    - GET payments/<payment_id>/ - Payment details
    - GET return/ - PayPal approval redirect
    - GET cancel/ - PayPal cancel redirect

All routes are prefixed with /api/v1/payments/paypal/ when included in the main URLconf.
"""

from django.urls import path

from paypal_gateway import views

app_name = "paypal_gateway"

urlpatterns = [
    path("card/", views.CardPaymentView.as_view(), name="card"),
    path("redirect/", views.RedirectPaymentView.as_view(), name="redirect"),
    path("execute/", views.ExecutePaymentView.as_view(), name="execute"),
    path(
        "payments/<str:payment_id>/",
        views.PaymentDetailView.as_view(),
        name="payment_detail",
    ),
    # Buyer's browser lands here from PayPal
    path("return/", views.PayPalReturnView.as_view(), name="return"),
    path("cancel/", views.PayPalCancelView.as_view(), name="cancel"),
]
