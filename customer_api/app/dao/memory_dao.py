"""
In-memory customer store.

Keeps customers in a dict keyed by id.  Useful for local runs without
a database file and for exercising the service in isolation.  Records
are copied on the way in and out so callers never share state with
the store.
"""

import threading
from typing import Dict, List, Optional

from customer_api.app.core.exceptions import DuplicateResourceError
from customer_api.app.dao.base import UPDATABLE_COLUMNS, CustomerDao
from customer_api.app.schemas.customer import (
    Customer,
    CustomerRegistrationRequest,
    CustomerUpdateRequest,
)


class InMemoryCustomerDao(CustomerDao):
    """Customer store backed by a process-local dict."""

    def __init__(self) -> None:
        self._customers: Dict[int, Customer] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def select_all_customers(self) -> List[Customer]:
        with self._lock:
            return [customer.model_copy() for customer in self._customers.values()]

    def select_customer_by_id(self, customer_id: int) -> Optional[Customer]:
        with self._lock:
            customer = self._customers.get(customer_id)
            return customer.model_copy() if customer else None

    def exists_customer_with_email(self, email: str) -> bool:
        with self._lock:
            return self._email_owner(email) is not None

    def exists_customer_with_id(self, customer_id: int) -> bool:
        with self._lock:
            return customer_id in self._customers

    def insert_customer(self, customer: CustomerRegistrationRequest) -> int:
        with self._lock:
            if self._email_owner(customer.email) is not None:
                raise DuplicateResourceError("email already taken")
            customer_id = self._next_id
            self._next_id += 1
            self._customers[customer_id] = Customer(
                id=customer_id,
                name=customer.name,
                email=customer.email,
                age=customer.age,
            )
            return customer_id

    def update_customer(self, customer_id: int, changes: CustomerUpdateRequest) -> None:
        values = changes.supplied_changes()
        updates = {column: values[column] for column in UPDATABLE_COLUMNS if column in values}
        with self._lock:
            current = self._customers.get(customer_id)
            if current is None or not updates:
                return
            owner = self._email_owner(updates.get("email"))
            if owner is not None and owner != customer_id:
                raise DuplicateResourceError("email already taken")
            self._customers[customer_id] = current.model_copy(update=updates)

    def delete_customer(self, customer_id: int) -> None:
        with self._lock:
            self._customers.pop(customer_id, None)

    def _email_owner(self, email: Optional[str]) -> Optional[int]:
        if email is None:
            return None
        for customer in self._customers.values():
            if customer.email == email:
                return customer.id
        return None
