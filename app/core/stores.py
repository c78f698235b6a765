"""
Record store adapters over Django models.

Lifecycle workers never talk to the ORM directly. They go through a store
that exposes two operations:

    find_many(**filters) -> list of records
    update_many(filters, **patch) -> number of rows changed

Keeping the surface this narrow lets workers be exercised against an
in-memory or failing store in tests, while production stores add
domain-specific query helpers on top (see payments.stores,
memberships.stores and marketing.stores).

Usage:
    class PaymentStore(ModelStore):
        model = Payment

    store = PaymentStore()
    store.update_many({"status": "pending"}, status="cancelled")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from django.db import models


class ModelStore:
    """
    Generic store bound to one Django model.

    Attributes:
        model: Model class the store reads and writes
        select_related: Relations joined into every find_many() query
    """

    model: ClassVar[type[models.Model]]
    select_related: ClassVar[tuple[str, ...]] = ()

    def queryset(self) -> models.QuerySet:
        queryset = self.model._default_manager.all()
        if self.select_related:
            queryset = queryset.select_related(*self.select_related)
        return queryset

    def find_many(self, **filters: Any) -> list:
        """Return all records matching the field lookups in ``filters``."""
        return list(self.queryset().filter(**filters))

    def update_many(self, filters: dict[str, Any], **patch: Any) -> int:
        """
        Apply ``patch`` to every record matching ``filters`` in one statement.

        The predicate is evaluated by the database at update time, so rows
        that stopped matching after an earlier read are left untouched.

        Returns:
            Number of rows updated
        """
        return self.model._default_manager.filter(**filters).update(**patch)


__all__ = ["ModelStore"]
