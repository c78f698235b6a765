"""
Workers for background payment processing.

This module contains Celery tasks for periodic payment maintenance:
- ExpirationSweeper: Cancels checkouts that stayed pending too long

Usage:
    from payments.workers import sweep_expired_payments

    # Trigger a sweep by hand
    sweep_expired_payments.delay()
"""

from payments.workers.expiration_sweeper import (
    ExpirationSweeper,
    SweepResult,
    sweep_expired_payments,
)

__all__ = [
    "ExpirationSweeper",
    "SweepResult",
    "sweep_expired_payments",
]
