"""
Pydantic schema definitions for API payloads.

Schemas are separated from the data-access layer to decouple the API
representation from persistence.
"""

from .customer import Customer, CustomerRegistrationRequest, CustomerUpdateRequest

__all__ = ["Customer", "CustomerRegistrationRequest", "CustomerUpdateRequest"]
