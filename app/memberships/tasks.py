"""
Celery tasks for membership e-mails.

Tasks:
    send_expiration_reminders: Daily reminders 7 days and 1 day before expiry
    send_monthly_premium_offers: Monthly premium upgrade offer

Both are scheduled by celery-beat (see migrations/0002_add_membership_schedules.py).

Usage:
    from memberships.tasks import send_expiration_reminders

    send_expiration_reminders.delay()
"""

from __future__ import annotations

import logging

from celery import shared_task
from django.utils import timezone
from redis.exceptions import RedisError

from core.exceptions import LockAcquisitionError
from core.locks import DistributedLock
from memberships.services import PremiumOfferCampaign, ReminderScheduler

logger = logging.getLogger(__name__)


# Reminder runs normally take seconds; the TTL only bounds a crashed worker
REMINDER_LOCK_TTL = 60 * 60


@shared_task(bind=True)
def send_expiration_reminders(self) -> dict:
    """
    Queue expiration reminders for today's 7-day and 1-day windows.

    A second invocation while one is still running on the same local day is
    skipped. If Redis cannot be reached the lock is unavailable, and the run
    goes ahead without it: a missed day cannot be recovered because the
    windows move on, while a duplicate reminder is harmless.

    Returns:
        Dict with:
        - seven_day_reminders: Number of 7-day reminders queued
        - one_day_reminders: Number of 1-day reminders queued
        - failed: Number of reminders that could not be queued
        - error: Error message if the run failed, else None
        or, when skipped:
        - skipped: True
        - reason: "already_running"
    """
    run_date = timezone.localdate()
    lock_key = f"memberships:reminders:{run_date.isoformat()}"
    log_context = {"run_date": run_date.isoformat(), "task_id": self.request.id}

    try:
        with DistributedLock(lock_key, ttl=REMINDER_LOCK_TTL, blocking=False):
            result = ReminderScheduler().run()
    except LockAcquisitionError:
        logger.info("Membership reminder run already in progress, skipping", extra=log_context)
        return {"skipped": True, "reason": "already_running"}
    except RedisError as e:
        logger.warning(
            f"Reminder lock unavailable, running without it: {e}",
            extra={**log_context, "error": str(e)},
        )
        result = ReminderScheduler().run()

    return result.to_dict()


@shared_task(bind=True)
def send_monthly_premium_offers(self) -> dict:
    """
    Queue the monthly premium offer for eligible free-tier users.

    Returns:
        Dict with:
        - sent: Number of offers queued
        - failed: Number of offers that could not be queued
        - error: Error message if the run failed, else None
    """
    return PremiumOfferCampaign().run().to_dict()
