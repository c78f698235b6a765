"""celery-beat entries owned by the memberships app."""

from django.conf import settings

from core.beat import BeatEntry


def beat_schedule() -> list[BeatEntry]:
    return [
        BeatEntry(
            name="Send Membership Expiration Reminders",
            task="memberships.tasks.send_expiration_reminders",
            crontab={"minute": "0", "hour": str(settings.MEMBERSHIP_REMINDER_HOUR)},
            description="E-mails active members whose period ends in 7 days or tomorrow.",
        ),
        BeatEntry(
            name="Send Monthly Premium Offers",
            task="memberships.tasks.send_monthly_premium_offers",
            crontab={"minute": "0", "hour": "10", "day_of_month": "1"},
            description=(
                "E-mails a premium upgrade offer to free-tier users who listed or "
                "bought something in the last 30 days."
            ),
        ),
    ]
