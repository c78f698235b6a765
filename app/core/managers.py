"""
Shared QuerySet base with creation-time filters.

Domain querysets subclass BaseQuerySet and attach with ``as_manager()``:

    class PaymentQuerySet(BaseQuerySet):
        def pending(self):
            return self.filter(status=PaymentStatus.PENDING)

    class Payment(BaseModel):
        objects = PaymentQuerySet.as_manager()

    Payment.objects.pending().created_at_or_before(cutoff)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.db import models

if TYPE_CHECKING:
    from datetime import datetime


class BaseQuerySet(models.QuerySet):
    """Filters over BaseModel.created_at."""

    def created_since(self, since: datetime) -> BaseQuerySet:
        """Records created at or after ``since`` (activity look-backs)."""
        return self.filter(created_at__gte=since)

    def created_at_or_before(self, cutoff: datetime) -> BaseQuerySet:
        """
        Records created at or before ``cutoff``.

        Sweeps use it for ``created_at <= now - threshold``.
        """
        return self.filter(created_at__lte=cutoff)
