from __future__ import annotations

import pytest

from customer_api.app.core.exceptions import (
    DuplicateResourceError,
    RequestValidationError,
    ResourceNotFoundError,
)
from customer_api.app.schemas.customer import CustomerRegistrationRequest, CustomerUpdateRequest
from customer_api.app.services.customer_service import CustomerService


def _register(service: CustomerService, name="Alice", email="a@x.com", age=30) -> int:
    return service.add_customer(CustomerRegistrationRequest(name=name, email=email, age=age))


def test_add_then_get_returns_stored_fields(service: CustomerService) -> None:
    customer_id = _register(service)

    customer = service.get_customer(customer_id)

    assert customer.id == customer_id
    assert (customer.name, customer.email, customer.age) == ("Alice", "a@x.com", 30)


def test_get_all_customers(service: CustomerService) -> None:
    assert service.get_all_customers() == []
    first = _register(service)
    second = _register(service, name="Bob", email="b@x.com", age=40)

    assert {c.id for c in service.get_all_customers()} == {first, second}


def test_add_duplicate_email_conflicts_without_second_row(service: CustomerService) -> None:
    _register(service)

    with pytest.raises(DuplicateResourceError, match="email already taken"):
        _register(service, name="Other Alice", age=22)

    assert len(service.get_all_customers()) == 1


def test_get_missing_customer_raises_not_found(service: CustomerService) -> None:
    with pytest.raises(ResourceNotFoundError, match=r"customer with id \[42\] not found"):
        service.get_customer(42)


def test_delete_missing_customer_raises_not_found(service: CustomerService) -> None:
    with pytest.raises(ResourceNotFoundError):
        service.delete_customer_by_id(42)


def test_delete_customer(service: CustomerService) -> None:
    customer_id = _register(service)

    service.delete_customer_by_id(customer_id)

    with pytest.raises(ResourceNotFoundError):
        service.get_customer(customer_id)


def test_update_missing_customer_raises_not_found(service: CustomerService) -> None:
    with pytest.raises(ResourceNotFoundError):
        service.update_customer_by_id(42, CustomerUpdateRequest(age=31))


def test_update_identical_payload_raises_validation_error(service: CustomerService) -> None:
    customer_id = _register(service)

    with pytest.raises(RequestValidationError, match="no data changes found"):
        service.update_customer_by_id(
            customer_id, CustomerUpdateRequest(name="Alice", email="a@x.com", age=30)
        )

    customer = service.get_customer(customer_id)
    assert (customer.name, customer.email, customer.age) == ("Alice", "a@x.com", 30)


def test_update_empty_payload_raises_validation_error(service: CustomerService) -> None:
    customer_id = _register(service)

    with pytest.raises(RequestValidationError):
        service.update_customer_by_id(customer_id, CustomerUpdateRequest())


def test_update_null_fields_are_ignored(service: CustomerService) -> None:
    customer_id = _register(service)

    with pytest.raises(RequestValidationError):
        service.update_customer_by_id(
            customer_id, CustomerUpdateRequest(name=None, email=None, age=None)
        )


def test_update_only_age(service: CustomerService) -> None:
    customer_id = _register(service)

    updated = service.update_customer_by_id(customer_id, CustomerUpdateRequest(age=31))

    customer = service.get_customer(customer_id)
    assert (customer.name, customer.email, customer.age) == ("Alice", "a@x.com", 31)
    assert updated == customer


def test_update_counts_only_changed_fields(service: CustomerService) -> None:
    customer_id = _register(service)

    service.update_customer_by_id(customer_id, CustomerUpdateRequest(name="Alice", age=45))

    assert service.get_customer(customer_id).age == 45


def test_update_email_taken_by_other_customer_conflicts(service: CustomerService) -> None:
    customer_id = _register(service)
    _register(service, name="Bob", email="b@x.com", age=40)

    with pytest.raises(DuplicateResourceError):
        service.update_customer_by_id(
            customer_id, CustomerUpdateRequest(name="Alicia", email="b@x.com")
        )

    customer = service.get_customer(customer_id)
    assert (customer.name, customer.email, customer.age) == ("Alice", "a@x.com", 30)


def test_update_email(service: CustomerService) -> None:
    customer_id = _register(service)

    service.update_customer_by_id(customer_id, CustomerUpdateRequest(email="alice@y.com"))

    assert service.get_customer(customer_id).email == "alice@y.com"
    assert service.get_customer(customer_id).name == "Alice"


def test_register_update_delete_scenario(service: CustomerService) -> None:
    customer_id = _register(service)
    assert service.get_customer(customer_id).model_dump() == {
        "id": customer_id, "name": "Alice", "email": "a@x.com", "age": 30,
    }

    service.update_customer_by_id(customer_id, CustomerUpdateRequest(age=31))
    assert service.get_customer(customer_id).model_dump() == {
        "id": customer_id, "name": "Alice", "email": "a@x.com", "age": 31,
    }

    service.delete_customer_by_id(customer_id)
    with pytest.raises(ResourceNotFoundError):
        service.get_customer(customer_id)
