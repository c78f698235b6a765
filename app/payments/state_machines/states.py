"""
State enums for payment models.

This module defines the enums used by the Payment model with django-fsm.
These are Django TextChoices for database storage and admin integration.

State Machine Overview:

Payment States:
    pending → completed → refunded
    pending → failed
    pending → cancelled (by the customer or by the expiration sweeper)
"""

from django.db import models


class PaymentStatus(models.TextChoices):
    """
    States for the Payment model lifecycle.

    Terminal states: CANCELLED, FAILED, REFUNDED
    A payment leaves PENDING exactly once.

    State Flow (Success):
        PENDING → COMPLETED

    Failure Flow:
        PENDING → FAILED

    Cancellation Flow:
        PENDING → CANCELLED

    Refund Flow:
        COMPLETED → REFUNDED
    """

    PENDING = "pending", "Pending"
    COMPLETED = "completed", "Completed"
    CANCELLED = "cancelled", "Cancelled"
    FAILED = "failed", "Failed"
    REFUNDED = "refunded", "Refunded"


class PaymentProvider(models.TextChoices):
    """
    Payment service providers.

    IYZICO: iyzico checkout form
    PAYTR: PayTR iframe checkout
    """

    IYZICO = "iyzico", "iyzico"
    PAYTR = "paytr", "PayTR"
