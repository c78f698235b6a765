"""
Factory Boy factories for authentication models.

Usage:
    from authentication.tests.factories import UserFactory

    # Regular user
    user = UserFactory()

    # User the marketing campaigns may contact
    user = UserFactory(email_verified=True, accepts_marketing_emails=True)

    # Banned user
    user = UserFactory(is_banned=True)
"""

import factory

from authentication.models import User


class UserFactory(factory.django.DjangoModelFactory):
    """
    Factory for User model.

    By default, users are verified, active, not banned and have not opted in
    to marketing e-mails.
    """

    class Meta:
        model = User
        skip_postgeneration_save = True

    email = factory.Sequence(lambda n: f"user{n}@example.com")
    display_name = factory.Sequence(lambda n: f"Collector {n}")
    email_verified = True
    is_banned = False
    accepts_marketing_emails = False
    is_active = True
    is_staff = False

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """Override create to use UserManager.create_user()."""
        password = kwargs.pop("password", "TestPass123!")
        return model_class.objects.create_user(
            email=kwargs.pop("email"), password=password, **kwargs
        )
