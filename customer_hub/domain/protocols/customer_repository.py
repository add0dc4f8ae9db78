"""CustomerRepository protocol for customer persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from customer_hub.domain.entities import Customer
from customer_hub.domain.protocols.repository import Repository
from customer_hub.domain.value_objects import CustomerSearchCriteria, Page


class CustomerRepository(Repository[Customer], Protocol):
    """Customer repository protocol (port).

    Adds customer-specific lookups to the generic repository. Sort order
    for every list result is (name, id).

    Example Implementation:
        >>> class CustomerRepository:
        ...     async def find_by_email(self, email: str) -> Customer | None:
        ...         # Database logic here
        ...         pass
    """

    async def find_by_email(self, email: str) -> Customer | None:
        """Find a non-deleted customer by email address.

        Email comparison is case-insensitive.

        Args:
            email: Customer's email address.

        Returns:
            Customer if found, None otherwise.
        """
        ...

    async def exists_by_email(
        self, email: str, exclude_id: UUID | None = None
    ) -> bool:
        """Check whether a non-deleted customer already uses an email.

        Args:
            email: Email to check (case-insensitive).
            exclude_id: Customer to ignore (the one being updated).

        Returns:
            True if another non-deleted customer has this email.
        """
        ...

    async def list_vip(self) -> list[Customer]:
        """All non-deleted VIP customers ordered by name."""
        ...

    async def search(self, criteria: CustomerSearchCriteria) -> Page[Customer]:
        """Filter and page customers.

        Name and email filters are case-insensitive substring matches; type
        and status are exact matches. Unset filters are ignored.

        Args:
            criteria: Filters and paging parameters.

        Returns:
            Page of matching customers with the total match count.

        Raises:
            ValueError: If paging parameters are out of range.
        """
        ...
