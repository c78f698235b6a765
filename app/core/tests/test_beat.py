"""
Tests for syncing celery-beat rows with settings.

Tests cover:
- Interval and crontab rows follow changed settings
- Missing rows are recreated, disabled rows stay disabled
- The sync runs on post_migrate
"""

import pytest
from django.core.management.sql import emit_post_migrate_signal
from django.test import override_settings
from django_celery_beat.models import PeriodicTask

from core.beat import BeatEntry, sync_periodic_tasks
from memberships.schedules import beat_schedule as membership_schedule
from payments.schedules import beat_schedule as payment_schedule


@pytest.mark.django_db
class TestSyncPeriodicTasks:
    @override_settings(PAYMENT_SWEEP_INTERVAL_MINUTES=2)
    def test_interval_follows_setting(self):
        """
        Given the sweep was installed every 5 minutes
        When PAYMENT_SWEEP_INTERVAL_MINUTES becomes 2 and the sync runs
        Then the existing row now runs every 2 minutes
        """
        sync_periodic_tasks(payment_schedule())

        task = PeriodicTask.objects.get(name="Cancel Expired Payments")
        assert task.interval.every == 2
        assert task.crontab is None

    @override_settings(MEMBERSHIP_REMINDER_HOUR=7, TIME_ZONE="Europe/Istanbul")
    def test_crontab_follows_hour_and_time_zone(self):
        sync_periodic_tasks(membership_schedule())

        task = PeriodicTask.objects.get(name="Send Membership Expiration Reminders")
        assert task.crontab.hour == "7"
        assert task.crontab.minute == "0"
        assert str(task.crontab.timezone) == "Europe/Istanbul"

    def test_disabled_task_stays_disabled(self):
        PeriodicTask.objects.filter(name="Cancel Expired Payments").update(enabled=False)

        sync_periodic_tasks(payment_schedule())

        assert PeriodicTask.objects.get(name="Cancel Expired Payments").enabled is False

    def test_creates_missing_task(self):
        entry = BeatEntry(
            name="Nightly Cleanup",
            task="core.tasks.cleanup",
            crontab={"minute": "30", "hour": "3"},
        )

        sync_periodic_tasks([entry])

        task = PeriodicTask.objects.get(name="Nightly Cleanup")
        assert task.task == "core.tasks.cleanup"
        assert (task.crontab.minute, task.crontab.hour, task.crontab.day_of_week) == (
            "30",
            "3",
            "*",
        )
        assert task.interval is None


@pytest.mark.django_db
class TestSyncOnMigrate:
    @override_settings(PAYMENT_SWEEP_INTERVAL_MINUTES=10, MEMBERSHIP_REMINDER_HOUR=8)
    def test_post_migrate_rewrites_schedules(self):
        """
        Given schedules installed with the default settings
        When post_migrate fires with new values in settings
        Then every app's rows reflect the new values
        """
        emit_post_migrate_signal(verbosity=0, interactive=False, db="default")

        sweep = PeriodicTask.objects.get(name="Cancel Expired Payments")
        reminders = PeriodicTask.objects.get(name="Send Membership Expiration Reminders")
        newsletter = PeriodicTask.objects.get(name="Send Weekly Newsletter")
        assert sweep.interval.every == 10
        assert reminders.crontab.hour == "8"
        assert newsletter.crontab.day_of_week == "1"
