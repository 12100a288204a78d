"""Customer service layer (Use Cases).

Orchestrates the Customer store operations, delegating persistence to
the injected ``ICustomerRepository``.

Rules enforced here:
- Absence is an explicit ``None`` (single look-up) or an empty list
  (name look-ups), never an exception.
- Delete is idempotent: removing a missing customer is not an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

if TYPE_CHECKING:
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a single customer by ID, or ``None`` when absent."""
        customer = self._repo.get_by_id(id)
        if customer is None:
            logger.info("customer.not_found", customer_id=id)
            return None
        logger.info("customer.retrieved", customer_id=id)
        return customer

    def find_by_first_name(self, first_name: str) -> List[Customer]:
        return self._repo.get_by_first_name(first_name)

    def find_by_last_name(self, last_name: str) -> List[Customer]:
        return self._repo.get_by_last_name(last_name)

    def find_by_first_name_and_last_name(
        self, first_name: str, last_name: str
    ) -> List[Customer]:
        return self._repo.get_by_full_name(first_name, last_name)

    def find_all(self) -> List[Customer]:
        """Return every customer, ordered by id."""
        return self._repo.list()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, customer: Customer) -> Customer:
        """Create or update a customer.

        A customer without an id is created and the store assigns one;
        a customer with an id replaces the stored record (or creates it
        under that id when it does not exist yet).
        """
        creating = not customer.is_persisted
        customer = self._repo.save(customer)
        logger.info(
            "customer.created" if creating else "customer.updated",
            customer_id=customer.id,
        )
        return customer

    @transaction.atomic
    def delete(self, id: int) -> None:
        """Delete a customer.  Missing customers are ignored."""
        removed = self._repo.delete(id)
        if not removed:
            logger.info("customer.delete_noop", customer_id=id)
