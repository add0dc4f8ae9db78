"""Entity capability protocols.

Capabilities are composed structurally: an entity opts in simply by having
the attributes. There is no base-entity class to inherit from.

Usage:
    from customer_hub.domain.protocols import SoftDeletable

    def is_visible(entity: SoftDeletable) -> bool:
        return not entity.is_deleted
"""

from datetime import datetime
from typing import Protocol, runtime_checkable
from uuid import UUID


@runtime_checkable
class Identified(Protocol):
    """Entity with a stable unique identifier."""

    id: UUID


@runtime_checkable
class Auditable(Protocol):
    """Entity that records when it was created and last modified."""

    created_at: datetime
    updated_at: datetime | None


@runtime_checkable
class SoftDeletable(Protocol):
    """Entity that is logically deleted instead of physically removed.

    Once is_deleted is True it never becomes False again, and every
    repository read excludes the entity.
    """

    is_deleted: bool
    deleted_at: datetime | None
