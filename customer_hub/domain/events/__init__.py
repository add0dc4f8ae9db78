"""Domain events."""

from customer_hub.domain.events.base_event import DomainEvent
from customer_hub.domain.events.customer_events import (
    CustomerActivated,
    CustomerCreated,
    CustomerDeleted,
    CustomerPromotedToVip,
    CustomerSuspended,
    CustomerUpdated,
)

__all__ = [
    "CustomerActivated",
    "CustomerCreated",
    "CustomerDeleted",
    "CustomerPromotedToVip",
    "CustomerSuspended",
    "CustomerUpdated",
    "DomainEvent",
]
