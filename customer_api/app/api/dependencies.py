"""
API dependencies.

Provides dependency injection for services.  The service instance is
built once by ``create_app`` and stored on ``app.state``; endpoints
receive it through ``Depends(get_customer_service)``.
"""

from fastapi import Request

from customer_api.app.services.customer_service import CustomerService


def get_customer_service(request: Request) -> CustomerService:
    """Return the customer service configured for this application."""
    return request.app.state.customer_service
