"""
Tests for the Payment model and its QuerySet.
"""

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from django.db import IntegrityError

from payments.models import Payment
from payments.state_machines import PaymentStatus
from payments.tests.factories import PaymentFactory


@pytest.mark.django_db
class TestPaymentModel:
    """Tests for Payment defaults and constraints."""

    def test_defaults(self):
        payment = PaymentFactory()

        assert payment.status == PaymentStatus.PENDING
        assert payment.currency == "TRY"
        assert payment.cancelled_at is None

    def test_str_includes_status_and_amount(self):
        payment = PaymentFactory(amount=Decimal("99.90"))

        assert "pending" in str(payment)
        assert "99.90 TRY" in str(payment)

    def test_amount_must_be_positive(self):
        with pytest.raises(IntegrityError):
            PaymentFactory(amount=Decimal("0"))


@pytest.mark.django_db
class TestPaymentQuerySet:
    """Tests for PaymentQuerySet filters."""

    def test_pending_excludes_other_states(self):
        pending = PaymentFactory()
        PaymentFactory(status=PaymentStatus.COMPLETED)
        PaymentFactory(status=PaymentStatus.CANCELLED)

        assert list(Payment.objects.pending()) == [pending]

    def test_created_at_or_before_is_inclusive(self, backdate):
        cutoff = datetime(2024, 1, 1, 0, 0, tzinfo=UTC)
        on_cutoff = backdate(PaymentFactory(), cutoff)
        backdate(PaymentFactory(), datetime(2024, 1, 1, 0, 1, tzinfo=UTC))

        assert list(Payment.objects.created_at_or_before(cutoff)) == [on_cutoff]
