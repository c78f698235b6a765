"""
Default clock implementation backed by Django's timezone utilities.

Usage:
    from core.clock import SystemClock

    SystemClock().now()  # aware datetime in UTC
"""

from __future__ import annotations

from datetime import datetime

from django.utils import timezone


class SystemClock:
    """Wall-clock time source. Honours freezegun in tests."""

    def now(self) -> datetime:
        return timezone.now()


__all__ = ["SystemClock"]
