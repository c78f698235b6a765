"""
Tests for PaymentStore.cancel_stale.
"""

from datetime import UTC, datetime, timedelta

import pytest

from payments.models import Payment
from payments.state_machines import PaymentStatus
from payments.stores import PaymentStore
from payments.tests.factories import PaymentFactory


@pytest.mark.django_db
class TestPaymentStoreCancelStale:
    def test_updates_only_pending_at_or_before_cutoff(self, backdate):
        """
        Given pending payments on both sides of the cutoff and a completed one
        When cancel_stale runs
        Then only the pending payment at the cutoff is updated
        """
        cutoff = datetime(2024, 1, 1, 0, 5, tzinfo=UTC)
        stale = backdate(PaymentFactory(), cutoff)
        fresh = backdate(PaymentFactory(), cutoff + timedelta(seconds=1))
        settled = backdate(PaymentFactory(status=PaymentStatus.COMPLETED), cutoff)

        updated = PaymentStore().cancel_stale(cutoff, failure_reason="stale")

        assert updated == 1
        reasons = dict(
            Payment.objects.filter(pk__in=[stale.pk, fresh.pk, settled.pk]).values_list(
                "pk", "failure_reason"
            )
        )
        assert reasons[stale.pk] == "stale"
        assert reasons[fresh.pk] is None
        assert reasons[settled.pk] is None
