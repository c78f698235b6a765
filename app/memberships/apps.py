"""
Memberships app configuration.
"""

from django.apps import AppConfig


class MembershipsConfig(AppConfig):
    """Configuration for the memberships application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "memberships"
    verbose_name = "Memberships"

    def ready(self):
        """Keep the reminder and offer schedules in line with settings."""
        from core.beat import connect_schedule_sync
        from memberships.schedules import beat_schedule

        connect_schedule_sync(self, beat_schedule)
