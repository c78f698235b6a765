from django.apps import AppConfig


class AuthenticationConfig(AppConfig):
    """Users keyed by e-mail, with the flags the lifecycle jobs filter on."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "authentication"
    verbose_name = "Users"
