"""Customer lifecycle domain events.

Published by command handlers after a successful commit. Subscribers run
fail-open: a failing subscriber never affects the command outcome.
"""

from dataclasses import dataclass
from uuid import UUID

from customer_hub.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerCreated(DomainEvent):
    """A new customer was registered.

    Triggers:
        - Welcome notification (background, fire-and-forget)
    """

    customer_id: UUID
    name: str
    email: str


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerUpdated(DomainEvent):
    """Customer name or contact details changed."""

    customer_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerPromotedToVip(DomainEvent):
    """Customer tier changed to VIP."""

    customer_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerSuspended(DomainEvent):
    customer_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerActivated(DomainEvent):
    customer_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerDeleted(DomainEvent):
    """Customer was logically deleted (irreversible)."""

    customer_id: UUID
