"""Container module - Centralized dependency injection.

The container is organized into modules by concern:
- infrastructure: logging, database, email, background notifications
- events: event bus and subscriptions
- dispatch: handler registry, dispatcher, request scope

Usage:
    from customer_hub.core.container import get_dispatcher, get_request_scope
"""

from customer_hub.core.container.dispatch import (
    get_dispatcher,
    get_handler_registry,
    get_request_scope,
)
from customer_hub.core.container.events import get_event_bus
from customer_hub.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
    get_notification_dispatcher,
)

__all__ = [
    "get_database",
    "get_db_session",
    "get_dispatcher",
    "get_email_service",
    "get_event_bus",
    "get_handler_registry",
    "get_logger",
    "get_notification_dispatcher",
    "get_request_scope",
]
