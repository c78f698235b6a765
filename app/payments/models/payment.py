"""
Payment model for checkout lifecycle management.

A Payment is created as PENDING when the customer starts checkout and is
moved to its final state by the provider callback or, if the customer never
completes checkout, by the expiration sweeper.

Usage:
    from payments.models import Payment
    from payments.state_machines import PaymentProvider, PaymentStatus

    payment = Payment.objects.create(
        payer=user,
        order=order,
        amount=Decimal("450.00"),
        provider=PaymentProvider.IYZICO,
    )

    # State transitions using django-fsm
    payment.complete(provider_reference="iyz-123")  # pending -> completed
    payment.save()

    # Stale checkouts
    Payment.objects.pending().created_at_or_before(cutoff)
"""

from __future__ import annotations

from django.conf import settings
from django.db import models
from django.utils import timezone

from django_fsm import FSMField, transition

from core.managers import BaseQuerySet
from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel

from payments.state_machines import PaymentProvider, PaymentStatus


class PaymentQuerySet(BaseQuerySet):
    """QuerySet with payment status filters."""

    def pending(self) -> PaymentQuerySet:
        return self.filter(status=PaymentStatus.PENDING)


class Payment(UUIDPrimaryKeyMixin, BaseModel):
    """
    Customer payment tracked by a django-fsm state machine.

    State Flow:
        PENDING -> COMPLETED -> REFUNDED
        PENDING -> FAILED
        PENDING -> CANCELLED

    Fields:
        payer: User making the payment
        order: Marketplace order being paid, if any
        amount: Amount charged
        currency: ISO 4217 currency code
        provider: Payment service provider
        provider_reference: Provider-side payment/conversation id
        status: Current FSM state
        *_at timestamps: Track state transition times
        failure_reason: Why the payment failed or was cancelled

    Note:
        Bulk cancellation by the expiration sweeper bypasses the
        transition methods and is guarded by a status == pending
        predicate instead (see payments.stores.PaymentStore).
    """

    # ==========================================================================
    # Relationships
    # ==========================================================================

    payer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="payments",
        help_text="User making the payment",
    )

    order = models.ForeignKey(
        "marketplace.Order",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="payments",
        help_text="Marketplace order being paid",
    )

    # ==========================================================================
    # Amount & Provider
    # ==========================================================================

    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text="Amount charged to the payer",
    )

    currency = models.CharField(
        max_length=3,
        default="TRY",
        help_text="ISO 4217 currency code",
    )

    provider = models.CharField(
        max_length=20,
        choices=PaymentProvider.choices,
        default=PaymentProvider.IYZICO,
        help_text="Payment service provider",
    )

    provider_reference = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        db_index=True,
        help_text="Provider-side payment id",
    )

    # ==========================================================================
    # State
    # ==========================================================================

    status = FSMField(
        default=PaymentStatus.PENDING,
        choices=PaymentStatus.choices,
        db_index=True,
        protected=True,  # Prevent direct assignment outside transitions
        help_text="Current state of the payment (managed by FSM)",
    )

    # ==========================================================================
    # State Timestamps
    # ==========================================================================

    completed_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the provider confirmed the payment",
    )

    failed_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When payment failed",
    )

    cancelled_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When payment was cancelled",
    )

    refunded_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When payment was refunded",
    )

    failure_reason = models.TextField(
        null=True,
        blank=True,
        help_text="Why the payment failed or was cancelled",
    )

    objects = PaymentQuerySet.as_manager()

    # ==========================================================================
    # Meta & Methods
    # ==========================================================================

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Payment"
        verbose_name_plural = "Payments"
        indexes = [
            models.Index(
                fields=["status", "created_at"],
                name="payment_status_created_idx",
            ),
            models.Index(
                fields=["payer", "status"],
                name="payment_payer_status_idx",
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount__gt=0),
                name="payment_amount_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"Payment({self.id}, {self.status}, {self.amount} {self.currency})"

    # ==========================================================================
    # State Transitions (django-fsm)
    # ==========================================================================

    @transition(
        field=status,
        source=PaymentStatus.PENDING,
        target=PaymentStatus.COMPLETED,
    )
    def complete(self, provider_reference: str | None = None):
        """
        Mark payment as completed.

        Transition: PENDING -> COMPLETED

        Called when the provider confirms the payment.
        """
        self.completed_at = timezone.now()
        if provider_reference:
            self.provider_reference = provider_reference

    @transition(
        field=status,
        source=PaymentStatus.PENDING,
        target=PaymentStatus.FAILED,
    )
    def fail(self, reason: str | None = None):
        """
        Mark payment as failed.

        Transition: PENDING -> FAILED

        Args:
            reason: Optional failure reason for debugging
        """
        self.failed_at = timezone.now()
        if reason:
            self.failure_reason = reason

    @transition(
        field=status,
        source=PaymentStatus.PENDING,
        target=PaymentStatus.CANCELLED,
    )
    def cancel(self, reason: str | None = None):
        """
        Cancel a payment that was never completed.

        Transition: PENDING -> CANCELLED
        """
        self.cancelled_at = timezone.now()
        if reason:
            self.failure_reason = reason

    @transition(
        field=status,
        source=PaymentStatus.COMPLETED,
        target=PaymentStatus.REFUNDED,
    )
    def refund(self):
        """
        Refund a completed payment.

        Transition: COMPLETED -> REFUNDED
        """
        self.refunded_at = timezone.now()
