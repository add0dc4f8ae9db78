"""Customer search criteria."""

from dataclasses import dataclass

from customer_hub.domain.enums import CustomerStatus, CustomerType


@dataclass(frozen=True, kw_only=True)
class CustomerSearchCriteria:
    """Filters and paging for customer search.

    Attributes:
        name: Case-insensitive substring match on name.
        email: Case-insensitive substring match on email.
        type: Exact customer type.
        status: Exact customer status.
        page_number: 1-based page index.
        page_size: Items per page.
    """

    name: str | None = None
    email: str | None = None
    type: CustomerType | None = None
    status: CustomerStatus | None = None
    page_number: int = 1
    page_size: int = 10
