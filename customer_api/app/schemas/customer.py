"""
Pydantic schemas for customers.

``Customer`` is the record read from the store and returned by the
API.  ``CustomerRegistrationRequest`` carries the fields needed to
register a customer; ``CustomerUpdateRequest`` is a partial update in
which every field is optional and absent or ``null`` values leave the
stored value untouched.
"""

from typing import Optional

from pydantic import BaseModel, Field

# Range of an SQLite INTEGER column.
SQL_INT_MIN = -(2**63)
SQL_INT_MAX = 2**63 - 1


class CustomerBase(BaseModel):
    name: str = Field(..., examples=["Alice"])
    email: str = Field(..., examples=["alice@example.com"])
    age: int = Field(..., ge=SQL_INT_MIN, le=SQL_INT_MAX, examples=[30])


class CustomerRegistrationRequest(CustomerBase):
    """Schema for registering a new customer."""


class CustomerUpdateRequest(BaseModel):
    """Schema for updating an existing customer.

    All fields are optional; only supplied, non-null values are
    considered.  ``model_fields_set`` tells which fields the client
    actually sent.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = Field(None, ge=SQL_INT_MIN, le=SQL_INT_MAX)

    def supplied_changes(self) -> dict:
        """Return the fields the client sent with a non-null value."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }


class Customer(CustomerBase):
    """Schema for reading a customer."""

    id: int

    model_config = {
        "from_attributes": True,
    }
