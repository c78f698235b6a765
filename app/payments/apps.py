"""Payment records and the sweep that cancels abandoned checkouts."""

from django.apps import AppConfig


class PaymentsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "payments"
    verbose_name = "Payments"

    def ready(self):
        from core.beat import connect_schedule_sync
        from payments.schedules import beat_schedule

        connect_schedule_sync(self, beat_schedule)
