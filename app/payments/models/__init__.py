"""
Payment domain models.

This module contains all payment-related models:
- Payment: A customer payment tracked from checkout to its final state
"""

from payments.models.payment import Payment, PaymentQuerySet

__all__ = [
    "Payment",
    "PaymentQuerySet",
]
