"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions are
wired here, once, at first use.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from customer_hub.domain.protocols import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Subscriptions:
        CustomerCreated -> NotificationEventHandler.handle_customer_created
            (welcome email, sent in the background)

    Returns:
        Event bus implementing EventBusProtocol.
    """
    from customer_hub.application.event_handlers.notification_event_handler import (
        NotificationEventHandler,
    )
    from customer_hub.core.container.infrastructure import (
        get_email_service,
        get_logger,
        get_notification_dispatcher,
    )
    from customer_hub.domain.events import CustomerCreated
    from customer_hub.infrastructure.events.in_memory_event_bus import (
        InMemoryEventBus,
    )

    event_bus = InMemoryEventBus(logger=get_logger())

    notifications = NotificationEventHandler(
        email_service=get_email_service(),
        background=get_notification_dispatcher(),
        logger=get_logger(),
    )
    event_bus.subscribe(CustomerCreated, notifications.handle_customer_created)

    return event_bus
