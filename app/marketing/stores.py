"""
Record stores read by the marketing e-mail jobs.

Usage:
    from marketing.stores import MarketingAudienceStore, ShowcaseStore

    MarketingAudienceStore().find_recipients(limit=1000)
    ShowcaseStore().find_popular(limit=8, since=thirty_days_ago)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.db.models import Count

from authentication.models import User
from core.stores import ModelStore
from marketplace.models import Product, ProductStatus

if TYPE_CHECKING:
    from datetime import datetime


class MarketingAudienceStore(ModelStore):
    """Store over users who may receive marketing e-mails."""

    model = User

    def find_recipients(self, limit: int) -> list[User]:
        """Up to ``limit`` opted-in, reachable users, oldest accounts first."""
        queryset = (
            self.queryset()
            .filter(
                is_active=True,
                is_banned=False,
                email_verified=True,
                accepts_marketing_emails=True,
            )
            .order_by("date_joined", "pk")
        )
        return list(queryset[:limit])


class ShowcaseStore(ModelStore):
    """Store over listings shown in marketing e-mails."""

    model = Product

    def find_popular(self, limit: int, since: datetime | None = None) -> list[Product]:
        """
        Active listings with the most orders, newest first on ties.

        With ``since``, only listings created at or after it are considered.
        Each product is annotated with ``order_count``.
        """
        queryset = self.queryset().filter(status=ProductStatus.ACTIVE)
        if since is not None:
            queryset = queryset.created_since(since)
        queryset = queryset.annotate(order_count=Count("orders")).order_by(
            "-order_count", "-created_at"
        )
        return list(queryset[:limit])


__all__ = ["MarketingAudienceStore", "ShowcaseStore"]
