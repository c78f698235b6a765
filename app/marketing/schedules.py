"""celery-beat entries owned by the marketing app."""

from core.beat import BeatEntry


def beat_schedule() -> list[BeatEntry]:
    return [
        BeatEntry(
            name="Send Weekly Newsletter",
            task="marketing.tasks.send_weekly_newsletter",
            crontab={"minute": "0", "hour": "9", "day_of_week": "1"},
            description="E-mails the most ordered listings to opted-in users every Monday.",
        ),
        BeatEntry(
            name="Send Monthly Promotions",
            task="marketing.tasks.send_monthly_promotions",
            crontab={"minute": "0", "hour": "10", "day_of_month": "1"},
            description=(
                "E-mails the most ordered listings of the last 30 days to "
                "opted-in users."
            ),
        ),
    ]
