"""
Tests for the weekly newsletter and monthly promotions.

Tests cover:
- Audience: opt-in and reachability flags, batch size
- Showcased listings: ordering by orders, status, 30 day window
- E-mail job content
- Query and per-record dispatch failures
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from django.db import OperationalError
from django.test import override_settings
from django.utils import timezone

from authentication.tests.factories import UserFactory
from marketing.services import MONTHLY_PROMOTIONS, WEEKLY_NEWSLETTER, MarketingCampaign
from marketing.stores import MarketingAudienceStore, ShowcaseStore
from marketplace.models import Product, ProductStatus
from marketplace.tests.factories import OrderFactory, ProductFactory
from notifications.dispatch import CampaignRunResult


def _subscriber(**kwargs):
    kwargs.setdefault("accepts_marketing_emails", True)
    return UserFactory(**kwargs)


def _age(product, days):
    Product.objects.filter(pk=product.pk).update(
        created_at=timezone.now() - timedelta(days=days)
    )


# =============================================================================
# Audience
# =============================================================================


@pytest.mark.django_db
class TestMarketingAudience:
    """Tests for who receives marketing e-mails."""

    @pytest.mark.parametrize("edition", [WEEKLY_NEWSLETTER, MONTHLY_PROMOTIONS])
    def test_opted_in_user_receives_edition(self, dispatcher, edition):
        """
        Given one opted-in user and one who did not opt in
        When either edition runs
        Then only the opted-in user gets a job with that edition's template
        """
        subscriber = _subscriber()
        UserFactory(accepts_marketing_emails=False)

        result = MarketingCampaign(edition, dispatcher=dispatcher).run()

        assert result == CampaignRunResult(sent=1)
        assert dispatcher.recipients == [subscriber.email]
        assert dispatcher.jobs[0].template == edition.template
        assert dispatcher.jobs[0].subject == edition.subject

    @pytest.mark.parametrize(
        "flags",
        [
            {"is_banned": True},
            {"email_verified": False},
            {"is_active": False},
        ],
    )
    def test_unreachable_subscribers_are_excluded(self, dispatcher, flags):
        _subscriber(**flags)

        result = MarketingCampaign(WEEKLY_NEWSLETTER, dispatcher=dispatcher).run()

        assert result == CampaignRunResult()
        assert dispatcher.jobs == []

    def test_consent_is_filtered_in_the_query(self):
        _subscriber()
        UserFactory(accepts_marketing_emails=False)

        recipients = MarketingAudienceStore().find_recipients(limit=10)

        assert [user.accepts_marketing_emails for user in recipients] == [True]

    def test_batch_size_limits_users_per_run(self, dispatcher):
        users = [_subscriber() for _ in range(3)]

        result = MarketingCampaign(
            WEEKLY_NEWSLETTER, dispatcher=dispatcher, batch_size=2
        ).run()

        assert result.sent == 2
        assert dispatcher.recipients == [users[0].email, users[1].email]

    @override_settings(MARKETING_BATCH_SIZE=1)
    def test_batch_size_from_settings(self, dispatcher):
        for _ in range(2):
            _subscriber()

        assert MarketingCampaign(MONTHLY_PROMOTIONS, dispatcher=dispatcher).run().sent == 1

    def test_explicit_zero_batch_size_is_kept(self, dispatcher):
        _subscriber()

        campaign = MarketingCampaign(WEEKLY_NEWSLETTER, dispatcher=dispatcher, batch_size=0)

        assert campaign.batch_size == 0
        assert campaign.run().sent == 0


# =============================================================================
# Showcased Listings
# =============================================================================


@pytest.mark.django_db
class TestShowcase:
    """Tests for which listings appear in the e-mails."""

    def test_most_ordered_listings_first(self):
        quiet = ProductFactory()
        popular = ProductFactory()
        for _ in range(2):
            OrderFactory(product=popular)

        products = ShowcaseStore().find_popular(limit=10)

        assert products == [popular, quiet]
        assert products[0].order_count == 2

    def test_only_active_listings(self):
        active = ProductFactory()
        for status in (ProductStatus.DRAFT, ProductStatus.SOLD, ProductStatus.INACTIVE):
            ProductFactory(status=status)

        assert ShowcaseStore().find_popular(limit=10) == [active]

    def test_limit_and_newest_first_on_ties(self):
        older = ProductFactory()
        _age(older, 2)
        newer = ProductFactory()

        assert ShowcaseStore().find_popular(limit=1) == [newer]

    def test_since_excludes_older_listings(self):
        recent = ProductFactory()
        stale = ProductFactory()
        _age(stale, 31)

        products = ShowcaseStore().find_popular(
            limit=10, since=timezone.now() - timedelta(days=30)
        )

        assert products == [recent]

    def test_newsletter_shows_all_ages_promotions_only_last_30_days(self, dispatcher):
        _subscriber()
        stale = ProductFactory(title="Matchbox Land Rover")
        _age(stale, 45)

        MarketingCampaign(WEEKLY_NEWSLETTER, dispatcher=dispatcher).run()
        MarketingCampaign(MONTHLY_PROMOTIONS, dispatcher=dispatcher).run()

        newsletter, promotions = dispatcher.jobs
        assert [p["title"] for p in newsletter.data["products"]] == ["Matchbox Land Rover"]
        assert promotions.data["products"] == []


# =============================================================================
# Job Content
# =============================================================================


@pytest.mark.django_db
class TestMarketingJobContent:
    @override_settings(FRONTEND_URL="https://tarodan.com/")
    def test_job_data(self, dispatcher):
        _subscriber(display_name="Elif")
        product = ProductFactory(title="Tomica Skyline GT-R", price=Decimal("320.00"))

        MarketingCampaign(WEEKLY_NEWSLETTER, dispatcher=dispatcher).run()

        assert dispatcher.jobs[0].data == {
            "user_name": "Elif",
            "products": [
                {
                    "title": "Tomica Skyline GT-R",
                    "price": "320.00",
                    "url": f"https://tarodan.com/products/{product.pk}",
                }
            ],
            "preferences_url": "https://tarodan.com/profile/settings",
        }


# =============================================================================
# Failure Handling
# =============================================================================


class TestMarketingFailures:
    def test_audience_query_failure_returns_error_result(self, dispatcher, caplog):
        audience = MagicMock(spec=MarketingAudienceStore)
        audience.find_recipients.side_effect = OperationalError("timeout")
        showcase = MagicMock(spec=ShowcaseStore)
        showcase.find_popular.return_value = []

        result = MarketingCampaign(
            WEEKLY_NEWSLETTER, audience=audience, showcase=showcase, dispatcher=dispatcher
        ).run()

        assert result == CampaignRunResult(error="timeout")
        assert dispatcher.jobs == []
        assert "Failed to load weekly newsletter data" in caplog.text

    def test_showcase_receives_promotion_window(self, dispatcher, clock_at):
        now = datetime(2024, 3, 1, 10, 0, tzinfo=UTC)
        audience = MagicMock(spec=MarketingAudienceStore)
        audience.find_recipients.return_value = []
        showcase = MagicMock(spec=ShowcaseStore)
        showcase.find_popular.return_value = []

        MarketingCampaign(
            MONTHLY_PROMOTIONS,
            audience=audience,
            showcase=showcase,
            dispatcher=dispatcher,
            clock=clock_at(now),
            batch_size=1000,
        ).run()

        showcase.find_popular.assert_called_once_with(limit=8, since=now - timedelta(days=30))
        audience.find_recipients.assert_called_once_with(limit=1000)

    @pytest.mark.django_db
    def test_dispatch_failure_is_counted_and_skipped(self, failing_dispatcher, caplog):
        """
        Given two subscribers and a broker that rejects the first
        When the newsletter runs
        Then the second still gets the e-mail and the failure is counted
        """
        users = [_subscriber() for _ in range(2)]
        dispatcher = failing_dispatcher(fail_for=[users[0].email])

        result = MarketingCampaign(WEEKLY_NEWSLETTER, dispatcher=dispatcher).run()

        assert result == CampaignRunResult(sent=1, failed=1)
        assert dispatcher.recipients == [users[1].email]
        assert f"Failed to queue weekly newsletter for user {users[0].pk}" in caplog.text
