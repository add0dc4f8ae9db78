"""Customer queries (CQRS read operations).

Queries represent requests for data. They never change state.
All queries are immutable (frozen=True) and use keyword-only arguments.
"""

from dataclasses import dataclass
from uuid import UUID

from customer_hub.domain.enums import CustomerStatus, CustomerType


@dataclass(frozen=True, kw_only=True)
class GetCustomerById:
    """Fetch a single non-deleted customer.

    Returns Failure(NotFoundError) when the customer is absent or deleted.
    """

    customer_id: UUID


@dataclass(frozen=True, kw_only=True)
class SearchCustomers:
    """Filter and page customers.

    Attributes:
        name: Case-insensitive substring filter on name.
        email: Case-insensitive substring filter on email.
        type: Exact customer type filter.
        status: Exact customer status filter.
        page_number: 1-based page number.
        page_size: Items per page.

    Example:
        >>> query = SearchCustomers(name="doe", page_number=1, page_size=10)
        >>> result = await dispatcher.send(query, scope)
        >>> # Returns Success(CustomerPageResult)
    """

    name: str | None = None
    email: str | None = None
    type: CustomerType | None = None
    status: CustomerStatus | None = None
    page_number: int = 1
    page_size: int = 10


@dataclass(frozen=True, kw_only=True)
class ListVipCustomers:
    """All non-deleted VIP customers ordered by name."""
