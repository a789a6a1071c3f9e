"""
Customer endpoints for API v1.

These routes expose CRUD operations for customers.  Handlers are thin:
the body is validated by pydantic, the work is done by
``CustomerService`` and domain errors are translated into HTTP status
codes (404 not found, 409 duplicate email, 400 nothing to update).
Ids and ages outside the SQLite INTEGER range are rejected with 422
before they reach the store.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from customer_api.app.api.dependencies import get_customer_service
from customer_api.app.core.exceptions import (
    DuplicateResourceError,
    RequestValidationError,
    ResourceNotFoundError,
)
from customer_api.app.schemas.customer import (
    SQL_INT_MAX,
    SQL_INT_MIN,
    Customer,
    CustomerRegistrationRequest,
    CustomerUpdateRequest,
)
from customer_api.app.services.customer_service import CustomerService

router = APIRouter()


@router.get("/", response_model=List[Customer])
def get_customers(service: CustomerService = Depends(get_customer_service)) -> List[Customer]:
    """Return every customer."""
    return service.get_all_customers()


@router.get("/{customer_id}", response_model=Customer)
def get_customer(
    customer_id: int = Path(..., ge=SQL_INT_MIN, le=SQL_INT_MAX),
    service: CustomerService = Depends(get_customer_service),
) -> Customer:
    """Retrieve a single customer by ID.  Returns 404 if it does not exist."""
    try:
        return service.get_customer(customer_id)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", status_code=status.HTTP_201_CREATED, response_class=Response)
def register_customer(
    request: CustomerRegistrationRequest,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """Register a new customer.

    Returns 201 with an empty body, or 409 if the email is taken.
    """
    try:
        service.add_customer(request)
    except DuplicateResourceError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete("/{customer_id}", response_class=Response)
def delete_customer(
    customer_id: int = Path(..., ge=SQL_INT_MIN, le=SQL_INT_MAX),
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """Delete a customer.  Returns 404 if it does not exist."""
    try:
        service.delete_customer_by_id(customer_id)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_200_OK)


@router.put("/{customer_id}", response_class=Response)
def update_customer(
    request: CustomerUpdateRequest,
    customer_id: int = Path(..., ge=SQL_INT_MIN, le=SQL_INT_MAX),
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """Partially update a customer.

    Only fields present in the body with a non-null value are
    considered; unspecified fields remain unchanged.
    """
    try:
        service.update_customer_by_id(customer_id, request)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DuplicateResourceError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except RequestValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return Response(status_code=status.HTTP_200_OK)
