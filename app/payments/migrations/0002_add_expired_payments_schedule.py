"""
Add celery-beat schedule for cancelling expired payments.

This migration creates the periodic task schedule for the
sweep_expired_payments task, which runs every
PAYMENT_SWEEP_INTERVAL_MINUTES (default 5) to cancel pending payments
older than PAYMENT_TIMEOUT_MINUTES.
"""

from django.conf import settings
from django.db import migrations

TASK_NAME = "Cancel Expired Payments"


def create_periodic_task(apps, schema_editor):
    """Create the periodic task for the expiration sweeper."""
    IntervalSchedule = apps.get_model("django_celery_beat", "IntervalSchedule")
    PeriodicTask = apps.get_model("django_celery_beat", "PeriodicTask")

    schedule, _ = IntervalSchedule.objects.get_or_create(
        every=settings.PAYMENT_SWEEP_INTERVAL_MINUTES,
        period="minutes",
    )

    PeriodicTask.objects.get_or_create(
        name=TASK_NAME,
        defaults={
            "task": "payments.workers.expiration_sweeper.sweep_expired_payments",
            "interval": schedule,
            "enabled": True,
            "description": (
                "Cancels pending payments that were not completed within "
                "PAYMENT_TIMEOUT_MINUTES. No notification is sent."
            ),
        },
    )


def remove_periodic_task(apps, schema_editor):
    """Remove the periodic task on migration rollback."""
    PeriodicTask = apps.get_model("django_celery_beat", "PeriodicTask")

    PeriodicTask.objects.filter(name=TASK_NAME).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("payments", "0001_initial"),
        ("django_celery_beat", "0019_alter_periodictasks_options"),
    ]

    operations = [
        migrations.RunPython(create_periodic_task, remove_periodic_task),
    ]
