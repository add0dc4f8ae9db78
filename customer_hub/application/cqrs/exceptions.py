"""Dispatcher configuration exceptions.

Both indicate programmer error (a request without a handler, or a request
registered twice) and are raised, never returned as Failure.
"""

from customer_hub.core.errors import InfrastructureError


class HandlerNotFoundError(InfrastructureError):
    """No handler is registered for the dispatched request type."""

    def __init__(self, request_type: type) -> None:
        super().__init__(f"No handler registered for {request_type.__name__}")
        self.request_type = request_type


class HandlerRegistrationError(InfrastructureError):
    """Handler table is inconsistent (duplicate or missing registrations)."""
