"""
Membership expiration reminders.

Every day the scheduler looks at two calendar days in the local timezone:

    today + 7  → "membership-expiring"         (days_remaining = 7)
    today + 1  → "membership-expiring-urgent"  (days_remaining = 1)

and queues one e-mail per active membership whose period ends on that day.
The two days are different dates, so a membership is reminded at most once
per run.

Failure behaviour:
    - If loading memberships fails, nothing is sent and the result carries
      the error
    - If queueing one e-mail fails, the failure is logged with the
      membership id and the run moves on to the next membership
    - E-mails already queued are never recalled

Usage:
    from memberships.services.reminders import ReminderScheduler

    result = ReminderScheduler().run()
    result.seven_day_reminders, result.one_day_reminders
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from django.conf import settings
from django.utils import timezone

from core.clock import SystemClock
from core.time_windows import window_for_offset
from memberships.stores import MembershipStore
from notifications.dispatch import CeleryEmailDispatcher, EmailJob

if TYPE_CHECKING:
    from datetime import datetime, tzinfo

    from core.protocols import Clock
    from memberships.models import UserMembership
    from notifications.protocols import NotificationDispatcher

logger = logging.getLogger(__name__)


# =============================================================================
# Rules
# =============================================================================


@dataclass(frozen=True)
class ReminderRule:
    """
    One reminder threshold.

    Attributes:
        days: Days between the run and the expiration day
        template: E-mail template identifier
        subject: Subject line; "{tier}" is replaced by the tier name
        counter: ReminderRunResult field counting queued e-mails
    """

    days: int
    template: str
    subject: str
    counter: str


SEVEN_DAY_REMINDER = ReminderRule(
    days=7,
    template="membership-expiring",
    subject="⏰ Your {tier} membership expires in 7 days",
    counter="seven_day_reminders",
)

ONE_DAY_REMINDER = ReminderRule(
    days=1,
    template="membership-expiring-urgent",
    subject="🚨 Your {tier} membership expires tomorrow!",
    counter="one_day_reminders",
)


@dataclass
class ReminderRunResult:
    """Outcome of one reminder run."""

    seven_day_reminders: int = 0
    one_day_reminders: int = 0
    failed: int = 0
    error: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


# =============================================================================
# Scheduler
# =============================================================================


class ReminderScheduler:
    """
    Queues expiration reminders for active memberships.

    Args:
        store: Membership store (default: MembershipStore)
        dispatcher: E-mail queue (default: CeleryEmailDispatcher)
        clock: Time source (default: SystemClock)
        tz: Timezone defining calendar days (default: settings.TIME_ZONE)
    """

    rules: tuple[ReminderRule, ...] = (SEVEN_DAY_REMINDER, ONE_DAY_REMINDER)

    def __init__(
        self,
        store: MembershipStore | None = None,
        dispatcher: NotificationDispatcher | None = None,
        clock: Clock | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        self.store = store or MembershipStore()
        self.dispatcher = dispatcher or CeleryEmailDispatcher()
        self.clock = clock or SystemClock()
        self.tz = tz or timezone.get_current_timezone()

    def run(self) -> ReminderRunResult:
        now = self.clock.now()
        result = ReminderRunResult()

        try:
            batches = [(rule, self.find_expiring(now, rule)) for rule in self.rules]
        except Exception as e:
            logger.exception(
                f"Failed to load expiring memberships: {e}",
                extra={"now": now.isoformat(), "error": str(e)},
            )
            result.error = str(e)
            return result

        for rule, memberships in batches:
            for membership in memberships:
                if self._enqueue(membership, rule):
                    setattr(result, rule.counter, getattr(result, rule.counter) + 1)
                else:
                    result.failed += 1

        logger.info(
            f"Queued {result.seven_day_reminders} 7-day and "
            f"{result.one_day_reminders} 1-day membership reminder(s)",
            extra=result.to_dict(),
        )
        return result

    def find_expiring(self, now: datetime, rule: ReminderRule) -> list[UserMembership]:
        """Active memberships whose period ends on the rule's calendar day."""
        window = window_for_offset(now, rule.days, self.tz)
        return self.store.find_ending_between(window.start, window.end)

    def build_job(self, membership: UserMembership, rule: ReminderRule) -> EmailJob:
        user = membership.user
        tier_name = membership.tier.name
        expires_at = timezone.localtime(membership.current_period_end, self.tz)

        return EmailJob(
            recipient=user.email,
            template=rule.template,
            subject=rule.subject.format(tier=tier_name),
            data={
                "user_name": user.get_greeting_name(),
                "tier_name": tier_name,
                "expiration_date": expires_at.strftime("%d.%m.%Y"),
                "days_remaining": rule.days,
                "renew_url": f"{settings.FRONTEND_URL.rstrip('/')}/membership/renew",
            },
        )

    def _enqueue(self, membership: UserMembership, rule: ReminderRule) -> bool:
        try:
            job_id = self.dispatcher.enqueue(self.build_job(membership, rule))
        except Exception as e:
            logger.exception(
                f"Failed to queue {rule.template} e-mail for membership "
                f"{membership.id}: {e}",
                extra={"membership_id": str(membership.id), "template": rule.template},
            )
            return False

        logger.debug(
            "Queued membership reminder",
            extra={
                "membership_id": str(membership.id),
                "template": rule.template,
                "job_id": job_id,
            },
        )
        return True
