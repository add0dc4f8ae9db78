"""CustomerRepository - SQLAlchemy implementation of CustomerRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Customer entities and database CustomerModel.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement

from customer_hub.domain.entities import Customer
from customer_hub.domain.enums import CustomerStatus, CustomerType
from customer_hub.domain.value_objects import (
    CustomerSearchCriteria,
    Email,
    Page,
    PhoneNumber,
)
from customer_hub.infrastructure.persistence.models.customer import CustomerModel
from customer_hub.infrastructure.persistence.repositories.sqlalchemy_repository import (
    SqlAlchemyRepository,
)


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite returns naive datetimes even for timezone-aware columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class CustomerRepository(SqlAlchemyRepository[Customer, CustomerModel]):
    """SQLAlchemy implementation of CustomerRepository protocol.

    Sort order for every list result is (name, id).

    Example:
        >>> async with database.get_session() as session:
        ...     repo = CustomerRepository(session)
        ...     customer = await repo.find_by_email("john@example.com")
    """

    model = CustomerModel

    def _sort_key(self) -> tuple[Any, ...]:
        return (CustomerModel.name, CustomerModel.id)

    async def find_by_email(self, email: str) -> Customer | None:
        """Find a non-deleted customer by email (case-insensitive)."""
        matches = await self.find(CustomerModel.email == email.strip().lower())
        return matches[0] if matches else None

    async def exists_by_email(
        self, email: str, exclude_id: UUID | None = None
    ) -> bool:
        predicates: list[ColumnElement[bool]] = [
            CustomerModel.email == email.strip().lower()
        ]
        if exclude_id is not None:
            predicates.append(CustomerModel.id != exclude_id)
        return await self.count(*predicates) > 0

    async def list_vip(self) -> list[Customer]:
        return await self.find(CustomerModel.type == CustomerType.VIP.value)

    async def search(self, criteria: CustomerSearchCriteria) -> Page[Customer]:
        """Filter and page customers.

        Raises:
            ValueError: If paging parameters are out of range.
        """
        predicates: list[ColumnElement[bool]] = []
        if criteria.name:
            predicates.append(
                CustomerModel.name.icontains(criteria.name, autoescape=True)
            )
        if criteria.email:
            predicates.append(
                CustomerModel.email.icontains(criteria.email, autoescape=True)
            )
        if criteria.type is not None:
            predicates.append(CustomerModel.type == criteria.type.value)
        if criteria.status is not None:
            predicates.append(CustomerModel.status == criteria.status.value)

        return await self._page(criteria.page_number, criteria.page_size, *predicates)

    # -------------------------------------------------------------------------
    # Mappers
    # -------------------------------------------------------------------------

    def _to_domain(self, model: CustomerModel) -> Customer:
        """Convert database model to domain entity."""
        return Customer(
            id=model.id,
            name=model.name,
            email=Email(model.email),
            phone=PhoneNumber(model.phone),
            type=CustomerType(model.type),
            status=CustomerStatus(model.status),
            created_at=_as_utc(model.created_at),  # type: ignore[arg-type]
            updated_at=_as_utc(model.updated_at),
            is_deleted=model.is_deleted,
            deleted_at=_as_utc(model.deleted_at),
            version=model.version,
        )

    def _to_model(self, entity: Customer) -> CustomerModel:
        """Convert domain entity to database model (version is assigned on insert)."""
        return CustomerModel(
            id=entity.id,
            name=entity.name,
            email=entity.email.value,
            phone=entity.phone.value,
            type=entity.type.value,
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            is_deleted=entity.is_deleted,
            deleted_at=entity.deleted_at,
        )

    def _apply(self, entity: Customer, model: CustomerModel) -> None:
        model.name = entity.name
        model.email = entity.email.value
        model.phone = entity.phone.value
        model.type = entity.type.value
        model.status = entity.status.value
        model.updated_at = entity.updated_at
        model.is_deleted = entity.is_deleted
        model.deleted_at = entity.deleted_at
