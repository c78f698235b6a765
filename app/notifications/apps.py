from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    """Templated e-mail delivery through a Celery job queue."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "notifications"
    verbose_name = "Notifications"
