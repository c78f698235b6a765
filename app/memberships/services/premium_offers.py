"""
Monthly premium offer campaign.

On the 1st of every month, free-tier users who listed or bought something in
the last PREMIUM_OFFER_ACTIVITY_DAYS days receive an invitation to upgrade.
See memberships.stores.PremiumCandidateStore for the full eligibility rule.

A run contacts at most PREMIUM_OFFER_BATCH_SIZE users. Failure handling
matches the reminder scheduler: a failed query aborts the run, a failed
enqueue is logged and skipped.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from django.conf import settings

from core.clock import SystemClock
from memberships.stores import PremiumCandidateStore
from notifications.dispatch import CampaignRunResult, CeleryEmailDispatcher, EmailJob

if TYPE_CHECKING:
    from authentication.models import User
    from core.protocols import Clock
    from notifications.protocols import NotificationDispatcher

logger = logging.getLogger(__name__)

PREMIUM_OFFER_TEMPLATE = "premium-offer"
PREMIUM_OFFER_SUBJECT = "🌟 More opportunities with a Premium membership!"

PREMIUM_BENEFITS = [
    "Unlimited listings",
    "Trade offers with other collectors",
    "Your own Digital Garage",
    "Featured listing slots",
    "Ad-free experience",
    "Lower commission rates",
]


class PremiumOfferCampaign:
    """
    Queues premium offer e-mails for eligible free-tier users.

    Args:
        store: Candidate store (default: PremiumCandidateStore)
        dispatcher: E-mail queue (default: CeleryEmailDispatcher)
        clock: Time source (default: SystemClock)
        batch_size: Maximum users per run (default: PREMIUM_OFFER_BATCH_SIZE)
        activity_days: Activity look-back (default: PREMIUM_OFFER_ACTIVITY_DAYS)
    """

    def __init__(
        self,
        store: PremiumCandidateStore | None = None,
        dispatcher: NotificationDispatcher | None = None,
        clock: Clock | None = None,
        batch_size: int | None = None,
        activity_days: int | None = None,
    ) -> None:
        self.store = store or PremiumCandidateStore()
        self.dispatcher = dispatcher or CeleryEmailDispatcher()
        self.clock = clock or SystemClock()
        if batch_size is None:
            batch_size = settings.PREMIUM_OFFER_BATCH_SIZE
        if activity_days is None:
            activity_days = settings.PREMIUM_OFFER_ACTIVITY_DAYS
        self.batch_size = batch_size
        self.activity_days = activity_days

    def run(self) -> CampaignRunResult:
        since = self.clock.now() - timedelta(days=self.activity_days)
        result = CampaignRunResult()

        try:
            candidates = self.store.find_candidates(since=since, limit=self.batch_size)
        except Exception as e:
            logger.exception(
                f"Failed to load premium offer candidates: {e}",
                extra={"since": since.isoformat(), "error": str(e)},
            )
            result.error = str(e)
            return result

        logger.info(f"Found {len(candidates)} eligible users for premium offer emails")

        for user in candidates:
            try:
                self.dispatcher.enqueue(self.build_job(user))
            except Exception as e:
                result.failed += 1
                logger.exception(
                    f"Failed to queue premium offer for user {user.pk}: {e}",
                    extra={"user_id": str(user.pk)},
                )
                continue
            result.sent += 1

        logger.info(
            f"Queued {result.sent} premium offer emails",
            extra=result.to_dict(),
        )
        return result

    def build_job(self, user: User) -> EmailJob:
        return EmailJob(
            recipient=user.email,
            template=PREMIUM_OFFER_TEMPLATE,
            subject=PREMIUM_OFFER_SUBJECT,
            data={
                "user_name": user.get_greeting_name(),
                "product_count": getattr(user, "product_count", 0),
                "order_count": getattr(user, "order_count", 0),
                "benefits": list(PREMIUM_BENEFITS),
                "cta_url": f"{settings.FRONTEND_URL.rstrip('/')}/membership",
                "cta_text": "Become a Premium member",
            },
        )
