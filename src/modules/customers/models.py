"""Customer model.

A customer is identified by a store-assigned integer id and carries a
first and last name plus optional contact details.  Name look-ups are
exact matches, so both name columns are indexed.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root."""

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(max_length=254, blank=True, default="")
    phone = models.CharField(max_length=20, blank=True, default="")
    address = models.TextField(blank=True, default="")

    # Fields a client may overwrite; everything else is store-managed.
    EDITABLE_FIELDS = ("first_name", "last_name", "email", "phone", "address")

    class Meta:
        db_table = "customers"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["first_name"], name="customers_first_name_idx"),
            models.Index(fields=["last_name"], name="customers_last_name_idx"),
            models.Index(
                fields=["first_name", "last_name"], name="customers_full_name_idx"
            ),
        ]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self) -> str:
        return f"Customer #{self.id} ({self.full_name})"
