"""
Pytest fixtures for payment tests.

Usage:
    def test_cancel(pending_payment):
        pending_payment.cancel()
        pending_payment.save()
        assert pending_payment.status == PaymentStatus.CANCELLED
"""

import pytest

from payments.models import Payment
from payments.state_machines import PaymentStatus
from payments.tests.factories import PaymentFactory


@pytest.fixture
def pending_payment(db):
    """Create a pending payment."""
    return PaymentFactory()


@pytest.fixture
def completed_payment(db):
    """Create a completed payment."""
    return PaymentFactory(status=PaymentStatus.COMPLETED)


@pytest.fixture
def backdate():
    """
    Move a payment's created_at to a fixed moment.

    created_at is auto_now_add, so it can only be changed with an UPDATE.
    """

    def _backdate(payment, created_at):
        Payment.objects.filter(pk=payment.pk).update(created_at=created_at)
        return Payment.objects.get(pk=payment.pk)

    return _backdate
