"""Marketing app configuration."""

from django.apps import AppConfig


class MarketingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "marketing"
    verbose_name = "Marketing"

    def ready(self):
        from core.beat import connect_schedule_sync
        from marketing.schedules import beat_schedule

        connect_schedule_sync(self, beat_schedule)
