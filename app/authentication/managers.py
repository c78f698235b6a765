"""
Manager for the e-mail keyed User model.

Staff accounts are created through create_superuser and start out with a
verified address so they can receive operational mail immediately.
"""

from django.contrib.auth.models import BaseUserManager


class UserManager(BaseUserManager):
    """Creates users identified by e-mail instead of username."""

    use_in_migrations = False

    def _build(self, email, password, **fields):
        if not email:
            raise ValueError("Users must have an email address")

        user = self.model(email=self.normalize_email(email), **fields)
        if password is None:
            user.set_unusable_password()
        else:
            user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        """
        Create a regular (non-staff) user.

        Raises:
            ValueError: when email is empty
        """
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._build(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("email_verified", True)

        for flag in ("is_staff", "is_superuser"):
            if extra_fields[flag] is not True:
                raise ValueError(f"Superuser must have {flag}=True.")

        return self._build(email, password, **extra_fields)
