"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
(or an empty list) instead of raising, and the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.management.color import no_style
from django.db import connection, transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by primary key, or ``None``."""
        return Customer.objects.filter(id=id).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Customer]:
        """List customers with optional Django ORM look-ups.

        Examples of valid filters::

            {"first_name": "Jane"}
            {"first_name": "Jane", "last_name": "Doe"}
        """
        queryset = Customer.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def get_by_first_name(self, first_name: str) -> List[Customer]:
        return self.list({"first_name": first_name})

    def get_by_last_name(self, last_name: str) -> List[Customer]:
        return self.list({"last_name": last_name})

    def get_by_full_name(self, first_name: str, last_name: str) -> List[Customer]:
        return self.list({"first_name": first_name, "last_name": last_name})

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer.

        An entity without an id is inserted and receives one.  An entity
        carrying an id overwrites the editable fields of that row, keeping
        its ``created_at``; if no such row exists it is inserted under
        that id.
        """
        is_new = (
            entity.id is None
            or not Customer.objects.filter(id=entity.id).exists()
        )
        if is_new:
            explicit_id = entity.id is not None
            entity.save(force_insert=True)
            if explicit_id:
                self._reset_id_sequence()
        else:
            entity.save(update_fields=list(Customer.EDITABLE_FIELDS))
            entity.refresh_from_db()
        logger.info(
            "customer.saved",
            customer_id=entity.id,
            is_new=is_new,
        )
        return entity

    @staticmethod
    def _reset_id_sequence() -> None:
        """Move the id sequence past rows inserted under a caller-chosen id."""
        statements = connection.ops.sequence_reset_sql(no_style(), [Customer])
        with connection.cursor() as cursor:
            for sql in statements:
                cursor.execute(sql)

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Delete a customer by ID.

        Returns ``True`` if a row was removed, ``False`` if no customer
        exists with the given ID.
        """
        deleted, _ = Customer.objects.filter(id=id).delete()
        if deleted:
            logger.info("customer.deleted", customer_id=id)
        return bool(deleted)
