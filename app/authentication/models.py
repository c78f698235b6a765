"""
The Tarodan user account.

Users sign in with their e-mail address. Besides the usual Django account
flags the model carries the consent and moderation state that the
membership e-mails are filtered on.
"""

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models

from authentication.managers import UserManager


class User(AbstractBaseUser, PermissionsMixin):
    """
    E-mail keyed account.

    Premium offers go only to users that are active, verified, not banned
    and have ``accepts_marketing_emails`` set. Expiry reminders are
    transactional and ignore the marketing flag.
    """

    email = models.EmailField(unique=True, db_index=True, help_text="Login and contact address")
    display_name = models.CharField(
        max_length=100, blank=True, default="", help_text="Name shown to other users"
    )

    email_verified = models.BooleanField(default=False)
    is_banned = models.BooleanField(default=False, db_index=True, help_text="Set by moderation")
    accepts_marketing_emails = models.BooleanField(
        default=False, help_text="Consent to receive promotional e-mail"
    )

    is_active = models.BooleanField(
        default=True, help_text="Unset to deactivate the account instead of deleting it"
    )
    is_staff = models.BooleanField(default=False, help_text="May log in to the admin site")

    date_joined = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    objects = UserManager()

    class Meta:
        verbose_name = "user"
        verbose_name_plural = "users"

    def __str__(self) -> str:
        return self.email

    def get_greeting_name(self) -> str:
        """display_name, or the local part of the address when it is blank."""
        return self.display_name or self.email.partition("@")[0]
