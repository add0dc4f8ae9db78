"""Customer result DTOs.

Handlers return these instead of entities so callers never mutate domain
objects outside the handler that loaded them.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from customer_hub.domain.entities import Customer
from customer_hub.domain.enums import CustomerStatus, CustomerType
from customer_hub.domain.value_objects import Page


@dataclass(frozen=True, kw_only=True)
class CustomerResult:
    """Read model of a customer.

    Attributes:
        id: Customer identifier.
        name: Display name.
        email: Normalized email.
        phone: Phone number.
        type: Customer tier.
        status: Lifecycle status.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC) or None.
    """

    id: UUID
    name: str
    email: str
    phone: str
    type: CustomerType
    status: CustomerStatus
    created_at: datetime
    updated_at: datetime | None


@dataclass(frozen=True, kw_only=True)
class CustomerPageResult:
    """One page of customers plus paging metadata."""

    items: tuple[CustomerResult, ...]
    total_count: int
    page_number: int
    page_size: int
    total_pages: int
    has_next: bool
    has_previous: bool


def to_customer_result(customer: Customer) -> CustomerResult:
    """Map a Customer entity to its read model."""
    return CustomerResult(
        id=customer.id,
        name=customer.name,
        email=customer.email.value,
        phone=customer.phone.value,
        type=customer.type,
        status=customer.status,
        created_at=customer.created_at,
        updated_at=customer.updated_at,
    )


def to_customer_page_result(page: Page[Customer]) -> CustomerPageResult:
    """Map a page of entities to a page of read models."""
    return CustomerPageResult(
        items=tuple(to_customer_result(c) for c in page.items),
        total_count=page.total_count,
        page_number=page.page_number,
        page_size=page.page_size,
        total_pages=page.total_pages,
        has_next=page.has_next,
        has_previous=page.has_previous,
    )
