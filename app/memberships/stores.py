"""
Record stores read by the membership e-mail jobs.

Usage:
    from memberships.stores import MembershipStore, PremiumCandidateStore

    MembershipStore().find_ending_between(window.start, window.end)

    PremiumCandidateStore().find_candidates(since=thirty_days_ago, limit=1000)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.db.models import Count, Exists, OuterRef, Q

from authentication.models import User
from core.stores import ModelStore
from marketplace.models import Order, Product
from memberships.models import MembershipTierType, UserMembership

if TYPE_CHECKING:
    from datetime import datetime


class MembershipStore(ModelStore):
    """Store over UserMembership, joining the user and tier."""

    model = UserMembership
    select_related = ("user", "tier")

    def find_ending_between(self, start: datetime, end: datetime) -> list[UserMembership]:
        """Active memberships whose period ends inside the inclusive range."""
        return list(self.queryset().active().ending_between(start, end))


class PremiumCandidateStore(ModelStore):
    """
    Store over users, with the premium offer eligibility query.

    A candidate is a reachable free-tier user who was active recently:

        - not banned, active, e-mail verified
        - opted in to marketing e-mails
        - no membership, or a membership on the free tier
        - listed a product or placed an order since ``since``
    """

    model = User

    def find_candidates(self, since: datetime, limit: int) -> list[User]:
        """
        Return up to ``limit`` eligible users, oldest accounts first.

        Each user is annotated with ``product_count`` (listings) and
        ``order_count`` (orders placed as buyer).
        """
        recent_listing = Product.objects.created_since(since).filter(seller=OuterRef("pk"))
        recent_purchase = Order.objects.created_since(since).filter(buyer=OuterRef("pk"))

        queryset = (
            self.queryset()
            .filter(
                is_active=True,
                is_banned=False,
                email_verified=True,
                accepts_marketing_emails=True,
            )
            .filter(
                Q(membership__isnull=True)
                | Q(membership__tier__type=MembershipTierType.FREE)
            )
            .filter(Q(Exists(recent_listing)) | Q(Exists(recent_purchase)))
            .annotate(
                product_count=Count("products", distinct=True),
                order_count=Count("buyer_orders", distinct=True),
            )
            .order_by("date_joined", "pk")
        )
        return list(queryset[:limit])


__all__ = ["MembershipStore", "PremiumCandidateStore"]
