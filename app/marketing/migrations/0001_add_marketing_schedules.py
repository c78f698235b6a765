"""
Add celery-beat schedules for the marketing e-mails.

Both crontabs are evaluated in settings.TIME_ZONE:
- send_weekly_newsletter: Mondays at 09:00
- send_monthly_promotions: 10:00 on the 1st of every month
"""

from django.conf import settings
from django.db import migrations

SCHEDULES = [
    {
        "name": "Send Weekly Newsletter",
        "task": "marketing.tasks.send_weekly_newsletter",
        "crontab": {"minute": "0", "hour": "9", "day_of_week": "1", "day_of_month": "*"},
        "description": "E-mails the most ordered listings to opted-in users every Monday.",
    },
    {
        "name": "Send Monthly Promotions",
        "task": "marketing.tasks.send_monthly_promotions",
        "crontab": {"minute": "0", "hour": "10", "day_of_week": "*", "day_of_month": "1"},
        "description": (
            "E-mails the most ordered listings of the last 30 days to "
            "opted-in users."
        ),
    },
]


def create_periodic_tasks(apps, schema_editor):
    CrontabSchedule = apps.get_model("django_celery_beat", "CrontabSchedule")
    PeriodicTask = apps.get_model("django_celery_beat", "PeriodicTask")

    for entry in SCHEDULES:
        schedule, _ = CrontabSchedule.objects.get_or_create(
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
    PeriodicTask = apps.get_model("django_celery_beat", "PeriodicTask")

    PeriodicTask.objects.filter(
        name__in=[entry["name"] for entry in SCHEDULES],
    ).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("django_celery_beat", "0019_alter_periodictasks_options"),
    ]

    operations = [
        migrations.RunPython(create_periodic_tasks, remove_periodic_tasks),
    ]
