"""
Add celery-beat schedules for the membership e-mail jobs.

This migration creates two crontab-scheduled periodic tasks, both evaluated
in settings.TIME_ZONE:
- send_expiration_reminders: daily at MEMBERSHIP_REMINDER_HOUR (default 09:00)
- send_monthly_premium_offers: 10:00 on the 1st of every month
"""

from django.conf import settings
from django.db import migrations

SCHEDULES = [
    {
        "name": "Send Membership Expiration Reminders",
        "task": "memberships.tasks.send_expiration_reminders",
        "crontab": {
            "minute": "0",
            "hour": str(settings.MEMBERSHIP_REMINDER_HOUR),
            "day_of_month": "*",
        },
        "description": (
            "E-mails active members whose period ends in 7 days or tomorrow."
        ),
    },
    {
        "name": "Send Monthly Premium Offers",
        "task": "memberships.tasks.send_monthly_premium_offers",
        "crontab": {"minute": "0", "hour": "10", "day_of_month": "1"},
        "description": (
            "E-mails a premium upgrade offer to free-tier users who listed or "
            "bought something in the last 30 days."
        ),
    },
]


def create_periodic_tasks(apps, schema_editor):
    """Create the crontab schedules and periodic tasks."""
    CrontabSchedule = apps.get_model("django_celery_beat", "CrontabSchedule")
    PeriodicTask = apps.get_model("django_celery_beat", "PeriodicTask")

    for entry in SCHEDULES:
        schedule, _ = CrontabSchedule.objects.get_or_create(
            day_of_week="*",
            month_of_year="*",
            timezone=settings.TIME_ZONE,
            **entry["crontab"],
        )
        PeriodicTask.objects.get_or_create(
            name=entry["name"],
            defaults={
                "task": entry["task"],
                "crontab": schedule,
                "enabled": True,
                "description": entry["description"],
            },
        )


def remove_periodic_tasks(apps, schema_editor):
    """Remove the periodic tasks on migration rollback."""
    PeriodicTask = apps.get_model("django_celery_beat", "PeriodicTask")

    PeriodicTask.objects.filter(
        name__in=[entry["name"] for entry in SCHEDULES],
    ).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("memberships", "0001_initial"),
        ("django_celery_beat", "0019_alter_periodictasks_options"),
    ]

    operations = [
        migrations.RunPython(create_periodic_tasks, remove_periodic_tasks),
    ]
