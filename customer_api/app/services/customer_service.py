"""
Business logic for customers.

``CustomerService`` validates that customers exist, keeps email
addresses unique and turns partial update requests into the set of
fields that actually change.  Persistence is delegated to the
``CustomerDao`` passed to the constructor.
"""

import logging
from typing import List

from customer_api.app.core.exceptions import (
    DuplicateResourceError,
    RequestValidationError,
    ResourceNotFoundError,
)
from customer_api.app.dao.base import CustomerDao
from customer_api.app.schemas.customer import (
    Customer,
    CustomerRegistrationRequest,
    CustomerUpdateRequest,
)

logger = logging.getLogger(__name__)


class CustomerService:
    """Service class for managing customers."""

    def __init__(self, customer_dao: CustomerDao) -> None:
        self._customer_dao = customer_dao

    def get_all_customers(self) -> List[Customer]:
        return self._customer_dao.select_all_customers()

    def get_customer(self, customer_id: int) -> Customer:
        """Return the customer or raise ``ResourceNotFoundError``."""
        customer = self._customer_dao.select_customer_by_id(customer_id)
        if customer is None:
            raise ResourceNotFoundError(f"customer with id [{customer_id}] not found")
        return customer

    def add_customer(self, registration: CustomerRegistrationRequest) -> int:
        """Register a new customer and return the generated id.

        Raises ``DuplicateResourceError`` when the email is already
        taken.  The store's unique constraint backs up this check for
        concurrent registrations.
        """
        if self._customer_dao.exists_customer_with_email(registration.email):
            logger.warning("Rejected registration, email %s already taken", registration.email)
            raise DuplicateResourceError("email already taken")
        customer_id = self._customer_dao.insert_customer(registration)
        logger.info("Registered customer %s", customer_id)
        return customer_id

    def delete_customer_by_id(self, customer_id: int) -> None:
        if not self._customer_dao.exists_customer_with_id(customer_id):
            raise ResourceNotFoundError(f"customer with id [{customer_id}] not found")
        self._customer_dao.delete_customer(customer_id)
        logger.info("Deleted customer %s", customer_id)

    def update_customer_by_id(self, customer_id: int, update: CustomerUpdateRequest) -> Customer:
        """Apply a partial update and return the updated customer.

        Only supplied, non-null fields that differ from the stored
        values are written.  Raises ``ResourceNotFoundError`` for an
        unknown id, ``DuplicateResourceError`` when the new email is
        taken and ``RequestValidationError`` when nothing would change.
        """
        customer = self.get_customer(customer_id)
        supplied = update.supplied_changes()
        changes = {}

        if "name" in supplied and supplied["name"] != customer.name:
            changes["name"] = supplied["name"]

        if "age" in supplied and supplied["age"] != customer.age:
            changes["age"] = supplied["age"]

        if "email" in supplied and supplied["email"] != customer.email:
            if self._customer_dao.exists_customer_with_email(supplied["email"]):
                logger.warning("Rejected update of customer %s, email already taken", customer_id)
                raise DuplicateResourceError("email already taken")
            changes["email"] = supplied["email"]

        if not changes:
            raise RequestValidationError("no data changes found")

        self._customer_dao.update_customer(customer_id, CustomerUpdateRequest(**changes))
        logger.info("Updated customer %s (%s)", customer_id, ", ".join(sorted(changes)))
        return customer.model_copy(update=changes)
