"""Generic repository protocol (port).

Collection-like access to one entity type. Reads never return logically
deleted entities, and "not found" is reported as None, never raised.
"""

from typing import Any, Protocol
from uuid import UUID

from customer_hub.domain.value_objects import Page


class Repository[T](Protocol):
    """Repository protocol for a single aggregate type.

    Mutations (add, update, remove) are staged only; they become durable
    when the owning unit of work commits.

    Methods:
        get_by_id: Retrieve entity by ID (None when absent or deleted)
        get_all: All non-deleted entities in the stable sort order
        get_paged: One page of non-deleted entities
        find: Entities matching boolean predicates
        add: Stage an insert
        update: Stage a modification
        remove: Stage a logical delete
        exists: Whether a non-deleted entity with this ID exists
        count: Number of non-deleted entities matching predicates
    """

    async def get_by_id(self, entity_id: UUID) -> T | None:
        """Find entity by ID.

        Args:
            entity_id: Entity's unique identifier.

        Returns:
            Entity if found and not deleted, None otherwise.
        """
        ...

    async def get_all(self) -> list[T]: ...

    async def get_paged(self, page_number: int, page_size: int) -> Page[T]:
        """Return one page of entities in the stable sort order.

        Args:
            page_number: 1-based page number.
            page_size: Items per page (> 0).

        Returns:
            Page with items and the total count of non-deleted entities.

        Raises:
            ValueError: If page_number < 1 or page_size < 1.
        """
        ...

    async def find(self, *predicates: Any) -> list[T]:
        """Find entities matching all predicates.

        Args:
            *predicates: Boolean expressions over the persistence model
                (combined with AND).
        """
        ...

    async def add(self, entity: T) -> None: ...

    async def update(self, entity: T) -> None:
        """Stage changes of a previously loaded entity.

        A deleted flag already persisted is never cleared by update.
        """
        ...

    async def remove(self, entity: T) -> None:
        """Stage a logical delete (sets is_deleted and deleted_at)."""
        ...

    async def exists(self, entity_id: UUID) -> bool: ...

    async def count(self, *predicates: Any) -> int: ...
