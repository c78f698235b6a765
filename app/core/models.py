"""
Abstract base for every Tarodan model.

Concrete models add UUIDPrimaryKeyMixin (core.model_mixins) when their ids
are exposed outside the database.
"""

from __future__ import annotations

from django.db import models


class BaseModel(models.Model):
    """
    Adds created_at/updated_at and newest-first ordering.

    created_at is indexed because the lifecycle sweeps and the premium offer
    activity check filter on it. QuerySet.update() does not touch auto_now
    fields, so bulk writers set updated_at themselves.
    """

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{type(self).__name__} {self.pk}"
