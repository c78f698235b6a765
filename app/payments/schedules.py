"""celery-beat entries owned by the payments app."""

from django.conf import settings

from core.beat import BeatEntry


def beat_schedule() -> list[BeatEntry]:
    return [
        BeatEntry(
            name="Cancel Expired Payments",
            task="payments.workers.expiration_sweeper.sweep_expired_payments",
            every_minutes=settings.PAYMENT_SWEEP_INTERVAL_MINUTES,
            description=(
                "Cancels pending payments that were not completed within "
                "PAYMENT_TIMEOUT_MINUTES. No notification is sent."
            ),
        ),
    ]
