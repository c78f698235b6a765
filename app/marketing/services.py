"""
Scheduled marketing e-mails.

Two editions share one runner:

    WEEKLY_NEWSLETTER    Mondays 09:00, the most ordered active listings
    MONTHLY_PROMOTIONS   the 1st at 10:00, the most ordered listings of the
                         last 30 days

Each run e-mails at most MARKETING_BATCH_SIZE opted-in users. A failed query
aborts the run with an error result; a job that cannot be queued is logged,
counted and skipped.

Usage:
    from marketing.services import MarketingCampaign, WEEKLY_NEWSLETTER

    MarketingCampaign(WEEKLY_NEWSLETTER).run().to_dict()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from django.conf import settings

from core.clock import SystemClock
from marketing.stores import MarketingAudienceStore, ShowcaseStore
from notifications.dispatch import CampaignRunResult, CeleryEmailDispatcher, EmailJob

if TYPE_CHECKING:
    from authentication.models import User
    from core.protocols import Clock
    from marketplace.models import Product
    from notifications.protocols import NotificationDispatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarketingEdition:
    """
    One kind of marketing e-mail.

    Attributes:
        name: Label used in logs
        template: Template identifier
        subject: Subject line
        product_limit: Listings shown per e-mail
        product_age_days: Only listings this recent are shown; None for all
    """

    name: str
    template: str
    subject: str
    product_limit: int
    product_age_days: int | None = None


WEEKLY_NEWSLETTER = MarketingEdition(
    name="weekly newsletter",
    template="newsletter-weekly",
    subject="📰 Tarodan Weekly Newsletter",
    product_limit=10,
)
MONTHLY_PROMOTIONS = MarketingEdition(
    name="monthly promotions",
    template="promotions-monthly",
    subject="🎁 Tarodan Monthly Deals",
    product_limit=8,
    product_age_days=30,
)


class MarketingCampaign:
    """
    Queues one edition of a marketing e-mail for every opted-in user.

    Args:
        edition: Which e-mail to send
        audience: Recipient store (default: MarketingAudienceStore)
        showcase: Listing store (default: ShowcaseStore)
        dispatcher: E-mail queue (default: CeleryEmailDispatcher)
        clock: Time source (default: SystemClock)
        batch_size: Maximum users per run (default: MARKETING_BATCH_SIZE)
    """

    def __init__(
        self,
        edition: MarketingEdition,
        audience: MarketingAudienceStore | None = None,
        showcase: ShowcaseStore | None = None,
        dispatcher: NotificationDispatcher | None = None,
        clock: Clock | None = None,
        batch_size: int | None = None,
    ) -> None:
        self.edition = edition
        self.audience = audience or MarketingAudienceStore()
        self.showcase = showcase or ShowcaseStore()
        self.dispatcher = dispatcher or CeleryEmailDispatcher()
        self.clock = clock or SystemClock()
        if batch_size is None:
            batch_size = settings.MARKETING_BATCH_SIZE
        self.batch_size = batch_size

    def run(self) -> CampaignRunResult:
        result = CampaignRunResult()
        since = None
        if self.edition.product_age_days is not None:
            since = self.clock.now() - timedelta(days=self.edition.product_age_days)

        try:
            products = self.showcase.find_popular(limit=self.edition.product_limit, since=since)
            recipients = self.audience.find_recipients(limit=self.batch_size)
        except Exception as e:
            logger.exception(
                f"Failed to load {self.edition.name} data: {e}",
                extra={"template": self.edition.template, "error": str(e)},
            )
            result.error = str(e)
            return result

        logger.info(
            f"Sending {self.edition.name} to {len(recipients)} users",
            extra={"template": self.edition.template, "product_count": len(products)},
        )
        showcased = [self.describe_product(product) for product in products]

        for user in recipients:
            try:
                self.dispatcher.enqueue(self.build_job(user, showcased))
            except Exception as e:
                result.failed += 1
                logger.exception(
                    f"Failed to queue {self.edition.name} for user {user.pk}: {e}",
                    extra={"user_id": str(user.pk)},
                )
                continue
            result.sent += 1

        logger.info(
            f"Queued {result.sent} {self.edition.name} emails",
            extra=result.to_dict(),
        )
        return result

    def describe_product(self, product: Product) -> dict:
        return {
            "title": product.title,
            "price": str(product.price),
            "url": f"{_frontend_url()}/products/{product.pk}",
        }

    def build_job(self, user: User, products: list[dict]) -> EmailJob:
        return EmailJob(
            recipient=user.email,
            template=self.edition.template,
            subject=self.edition.subject,
            data={
                "user_name": user.get_greeting_name(),
                "products": products,
                "preferences_url": f"{_frontend_url()}/profile/settings",
            },
        )


def _frontend_url() -> str:
    return settings.FRONTEND_URL.rstrip("/")


__all__ = [
    "MONTHLY_PROMOTIONS",
    "MarketingCampaign",
    "MarketingEdition",
    "WEEKLY_NEWSLETTER",
]
