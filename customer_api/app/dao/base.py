"""
Customer data-access contract.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from customer_api.app.schemas.customer import (
    Customer,
    CustomerRegistrationRequest,
    CustomerUpdateRequest,
)

# Columns an update may touch; ``id`` is never updated.
UPDATABLE_COLUMNS = ("name", "email", "age")


class CustomerDao(ABC):
    """Storage for customer records.

    Implementations do not enforce business rules beyond the unique
    email constraint; existence checks belong to the service layer.
    """

    @abstractmethod
    def select_all_customers(self) -> List[Customer]:
        """Return every customer in store order."""

    @abstractmethod
    def select_customer_by_id(self, customer_id: int) -> Optional[Customer]:
        """Return the customer or ``None`` if no row matches."""

    @abstractmethod
    def exists_customer_with_email(self, email: str) -> bool:
        pass

    @abstractmethod
    def exists_customer_with_id(self, customer_id: int) -> bool:
        pass

    @abstractmethod
    def insert_customer(self, customer: CustomerRegistrationRequest) -> int:
        """
        Store a new customer and return its generated id.

        Raises:
            DuplicateResourceError: the email is already stored
        """

    @abstractmethod
    def update_customer(self, customer_id: int, changes: CustomerUpdateRequest) -> None:
        """
        Apply the non-null fields of ``changes`` to the customer.

        Nothing is written when no field is supplied or the id is absent.

        Raises:
            DuplicateResourceError: the new email is already stored
        """

    @abstractmethod
    def delete_customer(self, customer_id: int) -> None:
        """Remove the customer; a missing id is a no-op."""
