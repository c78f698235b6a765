"""
Abstract mixins combined with core.models.BaseModel.

List mixins ahead of BaseModel so their fields take precedence:

    class Payment(UUIDPrimaryKeyMixin, BaseModel):
        ...
"""

from __future__ import annotations

import uuid

from django.db import models


class UUIDPrimaryKeyMixin(models.Model):
    """
    Random UUID primary key.

    Payment and membership ids leave the system in provider callbacks and
    e-mail links, so they must not be guessable sequence numbers.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        abstract = True
