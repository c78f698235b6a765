"""
Payment record store.

Usage:
    from payments.stores import PaymentStore

    store = PaymentStore()
    store.cancel_stale(cutoff, status=PaymentStatus.CANCELLED, cancelled_at=now)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from core.stores import ModelStore

from payments.models import Payment

if TYPE_CHECKING:
    from datetime import datetime


class PaymentStore(ModelStore):
    """Store over the Payment model."""

    model = Payment
    select_related = ("payer",)

    def cancel_stale(self, cutoff: datetime, **patch: Any) -> int:
        """
        Apply ``patch`` to pending payments created at or before ``cutoff``.

        One UPDATE statement; the pending predicate is re-checked by the
        database, so a payment completed in the meantime is left alone.
        """
        return (
            self.model._default_manager.pending()
            .created_at_or_before(cutoff)
            .update(**patch)
        )


__all__ = ["PaymentStore"]
