"""
Expiration sweeper for abandoned checkouts.

A payment is created as PENDING when the customer opens the provider's
checkout. If the customer walks away, nothing ever completes it. This worker
cancels such payments once they are older than PAYMENT_TIMEOUT_MINUTES.

Tasks:
- sweep_expired_payments: Periodic task (every PAYMENT_SWEEP_INTERVAL_MINUTES)

Behaviour:
    - Selects payments with status == pending and
      created_at <= now - PAYMENT_TIMEOUT_MINUTES
    - Cancels them in a single UPDATE guarded by the same predicate, so
      overlapping runs and late provider confirmations never cancel a
      payment that has already left PENDING
    - Sends no notification
    - Database errors are logged and reported in the result; the next tick
      retries naturally

Usage:
    # Typically called via celery-beat schedule
    from payments.workers import sweep_expired_payments

    sweep_expired_payments.delay()

    # Or directly, e.g. from a shell
    ExpirationSweeper().run().cancelled_count
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from celery import shared_task
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from core.clock import SystemClock

from payments.state_machines import PaymentStatus
from payments.stores import PaymentStore

if TYPE_CHECKING:
    from core.protocols import Clock


logger = logging.getLogger(__name__)


# =============================================================================
# Result
# =============================================================================


@dataclass
class SweepResult:
    """Outcome of one sweep."""

    cancelled_count: int = 0
    error: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


# =============================================================================
# Sweeper
# =============================================================================


class ExpirationSweeper:
    """
    Cancels pending payments older than the timeout threshold.

    Args:
        store: Payment store (default: PaymentStore)
        clock: Time source (default: SystemClock)
        threshold: Age after which a pending payment expires
            (default: PAYMENT_TIMEOUT_MINUTES)
        interval: How often the sweep runs
            (default: PAYMENT_SWEEP_INTERVAL_MINUTES)

    Raises:
        ImproperlyConfigured: If threshold is not longer than interval
    """

    def __init__(
        self,
        store: PaymentStore | None = None,
        clock: Clock | None = None,
        threshold: timedelta | None = None,
        interval: timedelta | None = None,
    ) -> None:
        self.store = store or PaymentStore()
        self.clock = clock or SystemClock()
        if threshold is None:
            threshold = timedelta(minutes=settings.PAYMENT_TIMEOUT_MINUTES)
        if interval is None:
            interval = timedelta(minutes=settings.PAYMENT_SWEEP_INTERVAL_MINUTES)
        self.threshold = threshold
        self.interval = interval

        if self.threshold <= self.interval:
            raise ImproperlyConfigured(
                f"Payment timeout ({self.threshold}) must be longer than the "
                f"sweep interval ({self.interval})"
            )

    @property
    def failure_reason(self) -> str:
        minutes = int(self.threshold.total_seconds() // 60)
        return f"Payment not completed within {minutes} minutes"

    def run(self) -> SweepResult:
        """
        Cancel every stale pending payment.

        Returns:
            SweepResult with the number of payments cancelled. Zero matches
            is a normal outcome.
        """
        now = self.clock.now()
        cutoff = now - self.threshold

        logger.debug(
            "Starting expired payment sweep",
            extra={"cutoff": cutoff.isoformat()},
        )

        try:
            cancelled_count = self.store.cancel_stale(
                cutoff,
                status=PaymentStatus.CANCELLED,
                cancelled_at=now,
                updated_at=now,
                failure_reason=self.failure_reason,
            )
        except Exception as e:
            logger.exception(
                f"Expired payment sweep failed: {e}",
                extra={"cutoff": cutoff.isoformat(), "error": str(e)},
            )
            return SweepResult(cancelled_count=0, error=str(e))

        if cancelled_count:
            logger.info(
                f"Cancelled {cancelled_count} expired payment(s)",
                extra={"cancelled_count": cancelled_count, "cutoff": cutoff.isoformat()},
            )

        return SweepResult(cancelled_count=cancelled_count)


# =============================================================================
# Periodic Task
# =============================================================================


@shared_task(bind=True)
def sweep_expired_payments(self) -> dict:
    """
    Cancel pending payments older than PAYMENT_TIMEOUT_MINUTES.

    Runs every PAYMENT_SWEEP_INTERVAL_MINUTES via celery-beat.

    Returns:
        Dict with:
        - cancelled_count: Number of payments cancelled
        - error: Error message if the sweep failed, else None

    Note:
        This task is idempotent. Running it twice, or two instances at
        once, cancels each payment at most once.
    """
    return ExpirationSweeper().run().to_dict()
