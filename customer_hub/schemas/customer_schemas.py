"""Customer request and response schemas.

Pydantic schemas for customer API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods

All bodies use camelCase on the wire (``pageNumber``, ``createdAt``) and
accept snake_case names as well when parsing.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from customer_hub.application.dtos import CustomerPageResult, CustomerResult
from customer_hub.domain.enums import CustomerStatus, CustomerType


class CamelModel(BaseModel):
    """Base schema serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Request Schemas
# =============================================================================


class CustomerCreateRequest(CamelModel):
    """Request body for creating a customer.

    Content rules (name pattern, email format, phone format, uniqueness)
    are enforced by the request pipeline, not here.
    """

    name: str = Field(..., description="Display name", examples=["Ada Lovelace"])
    email: str = Field(..., description="Email address", examples=["ada@example.com"])
    phone: str = Field(..., description="Phone number", examples=["+14155552671"])


class CustomerUpdateRequest(CamelModel):
    """Request body for replacing a customer's contact information."""

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    phone: str = Field(..., description="Phone number")


# =============================================================================
# Response Schemas
# =============================================================================


class CustomerResponse(CamelModel):
    """Single customer response.

    Attributes:
        id: Customer unique identifier.
        name: Display name.
        email: Normalized email address.
        phone: Phone number.
        type: Customer tier (Regular, Premium, Vip).
        status: Lifecycle status (Active, Inactive, Suspended).
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID = Field(..., description="Customer unique identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    phone: str = Field(..., description="Phone number")
    type: CustomerType = Field(..., description="Customer tier")
    status: CustomerStatus = Field(..., description="Lifecycle status")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: CustomerResult) -> "CustomerResponse":
        """Convert application DTO to response schema.

        Args:
            dto: CustomerResult from handler.

        Returns:
            CustomerResponse for API response.
        """
        return cls(
            id=dto.id,
            name=dto.name,
            email=dto.email,
            phone=dto.phone,
            type=dto.type,
            status=dto.status,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class CustomerPageResponse(CamelModel):
    """One page of customers plus paging metadata."""

    items: list[CustomerResponse] = Field(..., description="Customers on this page")
    total_count: int = Field(..., description="Matching customers across all pages")
    page_number: int = Field(..., description="1-based page number")
    page_size: int = Field(..., description="Requested page size")
    total_pages: int = Field(..., description="Number of pages")
    has_next: bool = Field(..., description="Whether a later page exists")
    has_previous: bool = Field(..., description="Whether an earlier page exists")

    @classmethod
    def from_dto(cls, dto: CustomerPageResult) -> "CustomerPageResponse":
        return cls(
            items=[CustomerResponse.from_dto(item) for item in dto.items],
            total_count=dto.total_count,
            page_number=dto.page_number,
            page_size=dto.page_size,
            total_pages=dto.total_pages,
            has_next=dto.has_next,
            has_previous=dto.has_previous,
        )
