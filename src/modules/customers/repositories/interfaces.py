"""Customer repository interface.

Extends ``IRepository[Customer]`` with the exact-match name look-ups
exposed by the customer endpoints.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def get_by_first_name(self, first_name: str) -> List[Customer]:
        """Customers whose first name matches exactly."""

    @abstractmethod
    def get_by_last_name(self, last_name: str) -> List[Customer]:
        """Customers whose last name matches exactly."""

    @abstractmethod
    def get_by_full_name(self, first_name: str, last_name: str) -> List[Customer]:
        """Customers matching both first and last name exactly."""
