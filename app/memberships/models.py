"""
Membership tier and user membership models.

Usage:
    from memberships.models import MembershipStatus, MembershipTier, UserMembership

    tier = MembershipTier.objects.get(type=MembershipTierType.PREMIUM)
    UserMembership.objects.create(
        user=user,
        tier=tier,
        current_period_start=start,
        current_period_end=start + timedelta(days=30),
    )

    # Memberships ending inside a window
    UserMembership.objects.active().ending_between(window.start, window.end)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.conf import settings
from django.db import models

from core.managers import BaseQuerySet
from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel

if TYPE_CHECKING:
    from datetime import datetime


class MembershipTierType(models.TextChoices):
    """Plan levels, from no entitlements to the full business package."""

    FREE = "free", "Free"
    BASIC = "basic", "Basic"
    PREMIUM = "premium", "Premium"
    BUSINESS = "business", "Business"


class MembershipStatus(models.TextChoices):
    """
    Membership lifecycle states.

    Only ACTIVE memberships receive expiration reminders.
    """

    ACTIVE = "active", "Active"
    EXPIRED = "expired", "Expired"
    CANCELLED = "cancelled", "Cancelled"


class MembershipTier(UUIDPrimaryKeyMixin, BaseModel):
    """
    A purchasable membership plan.

    Fields:
        name: Display name used in e-mails ("Premium")
        type: Plan level
        monthly_price: Price per month in TRY
        is_active: Whether the tier can be purchased
    """

    name = models.CharField(max_length=100)
    type = models.CharField(
        max_length=20,
        choices=MembershipTierType.choices,
        unique=True,
    )
    monthly_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
    )
    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ["monthly_price"]
        verbose_name = "membership tier"
        verbose_name_plural = "membership tiers"

    def __str__(self) -> str:
        return self.name


class UserMembershipQuerySet(BaseQuerySet):
    """QuerySet with membership period filters."""

    def active(self) -> UserMembershipQuerySet:
        return self.filter(status=MembershipStatus.ACTIVE)

    def ending_between(self, start: datetime, end: datetime) -> UserMembershipQuerySet:
        """Filter memberships whose period ends inside [start, end]."""
        return self.filter(current_period_end__gte=start, current_period_end__lte=end)


class UserMembership(UUIDPrimaryKeyMixin, BaseModel):
    """
    A user's current membership.

    Created and renewed by the purchase flow; the lifecycle jobs only read it.

    Fields:
        user: Member (one membership per user)
        tier: Current plan
        status: Membership state
        current_period_start: Start of the paid period
        current_period_end: End of the paid period
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="membership",
    )
    tier = models.ForeignKey(
        MembershipTier,
        on_delete=models.PROTECT,
        related_name="memberships",
    )
    status = models.CharField(
        max_length=20,
        choices=MembershipStatus.choices,
        default=MembershipStatus.ACTIVE,
        db_index=True,
    )
    current_period_start = models.DateTimeField()
    current_period_end = models.DateTimeField()

    objects = UserMembershipQuerySet.as_manager()

    class Meta:
        ordering = ["current_period_end"]
        verbose_name = "user membership"
        verbose_name_plural = "user memberships"
        indexes = [
            models.Index(
                fields=["status", "current_period_end"],
                name="membership_status_end_idx",
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(
                    current_period_end__gte=models.F("current_period_start")
                ),
                name="membership_period_end_after_start",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user} - {self.tier} ({self.status})"
