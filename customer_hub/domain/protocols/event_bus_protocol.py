"""Event bus protocol (port) for domain events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure layer implements adapters (InMemoryEventBus)
    - Container (customer_hub/core/container) provides factory function

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(CustomerCreated, send_welcome_notification)
    >>> await event_bus.publish(CustomerCreated(customer_id=..., ...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from customer_hub.domain.events import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and never fails the publisher.
        2. **Async support**: All handlers are async.
        3. **No ordering guarantees**: Handlers execute concurrently.
    """

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Register an async handler for one event type.

        Args:
            event_type: Concrete DomainEvent subclass.
            handler: Async callable receiving the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to every handler subscribed to its type.

        Never raises because of a handler failure; failures are logged.
        """
        ...
