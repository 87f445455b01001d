"""
PayPal gateway app.

This app handles:
- PayPal component configuration (credentials, mode, logging)
- Credit card payments
- PayPal account (redirect) payments
- Payment lookup and execution

Usage:
    from paypal_gateway.component import get_paypal

    # Redirect payment: send the buyer to result.approval_url
    result = get_paypal().pay_paypal(
        {"return_url": "https://shop.example/paypal/return/"},
        total="19.99",
        description="Order #1042",
    )

    # Back on the return URL
    result = get_paypal().execute_payment(payment_id, payer_id)
"""
