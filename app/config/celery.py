"""
Celery configuration for the Tarodan backend.

Celery runs every background job of the platform:
- Periodic lifecycle sweeps (expired payments, membership reminders,
  monthly premium offers), fired by celery-beat
- Outbound e-mail jobs handed off by the schedulers

Periodic schedules live in the database (django-celery-beat
DatabaseScheduler) and are created by data migrations in the payments and
memberships apps, so operators can pause or retime them from the admin.

This configuration uses Redis as both the message broker and result backend.
Tasks are auto-discovered from all installed Django apps.

Usage:
    # Worker and beat processes
    celery -A config worker -l info
    celery -A config beat -l info

    # Trigger a sweep by hand
    from payments.workers import sweep_expired_payments
    sweep_expired_payments.delay()

For more information, see:
https://docs.celeryq.dev/en/stable/django/first-steps-with-django.html
"""

import os

from celery import Celery

# Set the default Django settings module for the Celery worker
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("tarodan")

# All Celery settings are prefixed with CELERY_ in settings.py
app.config_from_object("django.conf:settings", namespace="CELERY")

# Looks for a tasks.py module in each installed app
app.autodiscover_tasks()

# Workers live outside tasks.py in the payments app
app.autodiscover_tasks(["payments.workers"], related_name="expiration_sweeper")
