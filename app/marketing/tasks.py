"""
Celery tasks for marketing e-mails.

Tasks:
    send_weekly_newsletter: Mondays at 09:00
    send_monthly_promotions: 10:00 on the 1st of every month

Both are scheduled by celery-beat (see migrations/0001_add_marketing_schedules.py).

Usage:
    from marketing.tasks import send_weekly_newsletter

    send_weekly_newsletter.delay()
"""

from __future__ import annotations

from celery import shared_task

from marketing.services import MONTHLY_PROMOTIONS, WEEKLY_NEWSLETTER, MarketingCampaign


@shared_task(bind=True)
def send_weekly_newsletter(self) -> dict:
    """
    Queue the weekly newsletter for every opted-in user.

    Returns:
        Dict with:
        - sent: Number of newsletters queued
        - failed: Number that could not be queued
        - error: Error message if the run failed, else None
    """
    return MarketingCampaign(WEEKLY_NEWSLETTER).run().to_dict()


@shared_task(bind=True)
def send_monthly_promotions(self) -> dict:
    """Queue the monthly promotions e-mail; same result shape as the newsletter."""
    return MarketingCampaign(MONTHLY_PROMOTIONS).run().to_dict()
