"""Base abstract models shared by the domain modules.

Provides ``BaseModel``: integer primary key plus ``created_at`` /
``updated_at`` bookkeeping.  The primary key is assigned by the database
on insert and never changes afterwards; ``id is None`` means the entity
has not been persisted yet.
"""

from __future__ import annotations

from django.db import models

# Largest value a BigAutoField primary key can hold
MAX_ID = 2**63 - 1


class BaseModel(models.Model):
    """Abstract base with auto-increment PK and timestamp bookkeeping."""

    id = models.BigAutoField(primary_key=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)
