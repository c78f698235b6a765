"""
Calendar-day windows used to bucket records by date.

The membership reminder scheduler asks "which memberships end on the day
that is N days from now?". This module answers the calendar part of that
question and nothing else: it is pure and has no database access.

Usage:
    from core.time_windows import window_for_offset

    window = window_for_offset(now, 7)
    UserMembership.objects.filter(
        current_period_end__range=(window.start, window.end),
    )

Windows are computed in a configurable timezone (by default
settings.TIME_ZONE), so "tomorrow" means the operator's tomorrow rather than
UTC's. Both bounds are inclusive.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta, tzinfo
from typing import NamedTuple

from django.utils import timezone


class TimeWindow(NamedTuple):
    """Inclusive [start, end] range of aware datetimes."""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end

    def overlaps(self, other: TimeWindow) -> bool:
        return self.start <= other.end and other.start <= self.end


def window_for_offset(
    now: datetime,
    days: int,
    tz: tzinfo | None = None,
) -> TimeWindow:
    """
    Return the full local calendar day lying ``days`` days after ``now``.

    Args:
        now: Reference moment. Naive values are interpreted in ``tz``.
        days: Day offset; 0 is the current day, negative values look back.
        tz: Timezone defining day boundaries (default: current timezone)

    Returns:
        TimeWindow from 00:00:00 to 23:59:59.999999 local time

    Example:
        >>> window_for_offset(datetime(2024, 1, 1, 9, tzinfo=UTC), 7, UTC)
        TimeWindow(start=2024-01-08 00:00:00+00:00, end=2024-01-08 23:59:59.999999+00:00)
    """
    tz = tz or timezone.get_current_timezone()
    if timezone.is_naive(now):
        now = timezone.make_aware(now, tz)

    target_day = now.astimezone(tz).date() + timedelta(days=days)
    return TimeWindow(
        start=datetime.combine(target_day, time.min, tzinfo=tz),
        end=datetime.combine(target_day, time.max, tzinfo=tz),
    )


__all__ = ["TimeWindow", "window_for_offset"]
