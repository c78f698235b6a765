"""
Payments app.

This app handles:
- Payment records and their FSM lifecycle
- Cancelling pending payments that outlive PAYMENT_TIMEOUT_MINUTES

Related apps:
    - authentication: User model for the payer
    - marketplace: Order being paid

Usage:
    from payments.models import Payment
    from payments.workers import sweep_expired_payments

    sweep_expired_payments.delay()
"""
