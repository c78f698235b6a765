"""
celery-beat schedules derived from settings.

The data migrations create each PeriodicTask once, with the settings values
of that moment. Every app that owns periodic tasks also declares them in a
``schedules.py`` and connects it here, so each ``migrate`` run brings the
existing rows back in line with the current environment:

    class PaymentsConfig(AppConfig):
        def ready(self):
            from core.beat import connect_schedule_sync
            from payments.schedules import beat_schedule

            connect_schedule_sync(self, beat_schedule)

Schedules are rewritten, ``enabled`` is not: a task switched off in the
admin stays off.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS
from django.db.models.signals import post_migrate

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from django.apps import AppConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BeatEntry:
    """
    One periodic task.

    Exactly one of ``every_minutes`` and ``crontab`` is set. ``crontab``
    holds CrontabSchedule fields; unset fields mean "*". Crontabs are
    evaluated in settings.TIME_ZONE.
    """

    name: str
    task: str
    description: str = ""
    every_minutes: int | None = None
    crontab: dict[str, str] = field(default_factory=dict)


def sync_periodic_tasks(entries: Iterable[BeatEntry], using: str = DEFAULT_DB_ALIAS) -> None:
    """Create or update the PeriodicTask row of every entry."""
    from django_celery_beat.models import CrontabSchedule, IntervalSchedule, PeriodicTask

    for entry in entries:
        if entry.every_minutes is not None:
            interval, _ = IntervalSchedule.objects.using(using).get_or_create(
                every=entry.every_minutes,
                period=IntervalSchedule.MINUTES,
            )
            schedule = {"interval": interval, "crontab": None}
        else:
            fields = {
                "minute": "*",
                "hour": "*",
                "day_of_week": "*",
                "day_of_month": "*",
                "month_of_year": "*",
                **entry.crontab,
            }
            crontab, _ = CrontabSchedule.objects.using(using).get_or_create(
                timezone=settings.TIME_ZONE,
                **fields,
            )
            schedule = {"crontab": crontab, "interval": None}

        _, created = PeriodicTask.objects.using(using).update_or_create(
            name=entry.name,
            defaults={"task": entry.task, "description": entry.description, **schedule},
        )
        logger.debug(
            f"{'Created' if created else 'Synced'} beat schedule {entry.name!r}",
            extra={"task": entry.task},
        )


def connect_schedule_sync(
    app_config: AppConfig,
    schedule_factory: Callable[[], list[BeatEntry]],
) -> None:
    """Re-sync ``schedule_factory()`` after every migrate run."""

    def _sync(sender, using=DEFAULT_DB_ALIAS, apps=None, **kwargs):
        if apps is not None:
            try:
                apps.get_model("django_celery_beat", "PeriodicTask")
            except LookupError:
                # beat tables not migrated on this database yet
                return
        sync_periodic_tasks(schedule_factory(), using=using)

    # Sent once per app with models; django_celery_beat's signal comes
    # after all migrations of the run have been applied.
    post_migrate.connect(
        _sync,
        sender=app_config.apps.get_app_config("django_celery_beat"),
        weak=False,
        dispatch_uid=f"{app_config.label}.sync_beat_schedules",
    )


__all__ = ["BeatEntry", "connect_schedule_sync", "sync_periodic_tasks"]
