"""
Exceptions raised by the service and data-access layers.

The API layer translates them into HTTP status codes.
"""


class CustomerApiError(Exception):
    """Base class for domain errors."""
    pass


class ResourceNotFoundError(CustomerApiError):
    """The requested customer does not exist."""
    pass


class DuplicateResourceError(CustomerApiError):
    """The email address already belongs to a customer."""
    pass


class RequestValidationError(CustomerApiError):
    """The request is well formed but cannot be applied."""
    pass
