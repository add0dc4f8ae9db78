"""Base domain event class.

Domain events represent "things that happened" in the customer domain and
are always named in past tense (CustomerCreated, CustomerPromotedToVip).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUIDv7) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (CustomerCreated, NOT CreateCustomer)
        3. Be frozen dataclasses with kw_only=True
        4. Carry the data subscribers need (no entity references)

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
