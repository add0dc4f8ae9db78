"""Generic SQLAlchemy repository.

Shared implementation of the Repository protocol for soft-deletable models.
Concrete repositories provide the model class, the stable sort key and the
entity <-> model mappers.

Invariants:
    - Every read adds is_deleted = false.
    - Mutations are staged on the session; nothing is flushed or committed
      here. The unit of work commits.
    - A persisted deleted flag is never cleared by update().
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from customer_hub.domain.value_objects import Page
from customer_hub.infrastructure.persistence.base import BaseMutableModel


class SqlAlchemyRepository[TEntity, TModel: BaseMutableModel]:
    """Base repository for one entity/model pair.

    Subclasses set `model` and implement `_to_domain`, `_to_model`,
    `_apply` and `_sort_key`.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    model: type[TModel]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    # -------------------------------------------------------------------------
    # Mapping hooks
    # -------------------------------------------------------------------------

    def _to_domain(self, model: TModel) -> TEntity:
        raise NotImplementedError

    def _to_model(self, entity: TEntity) -> TModel:
        raise NotImplementedError

    def _apply(self, entity: TEntity, model: TModel) -> None:
        """Copy mutable entity fields onto a tracked model."""
        raise NotImplementedError

    def _sort_key(self) -> tuple[Any, ...]:
        return (self.model.id,)

    # -------------------------------------------------------------------------
    # Query helpers
    # -------------------------------------------------------------------------

    def _not_deleted(self) -> ColumnElement[bool]:
        return self.model.is_deleted.is_(False)

    def _select_active(self, *predicates: ColumnElement[bool]) -> Select[tuple[TModel]]:
        return (
            select(self.model)
            .where(self._not_deleted(), *predicates)
            .order_by(*self._sort_key())
        )

    async def _fetch(self, stmt: Select[tuple[TModel]]) -> list[TEntity]:
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def _page(
        self,
        page_number: int,
        page_size: int,
        *predicates: ColumnElement[bool],
    ) -> Page[TEntity]:
        if page_number < 1:
            raise ValueError(f"page_number must be >= 1, got {page_number}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        total = await self.count(*predicates)
        stmt = (
            self._select_active(*predicates)
            .offset((page_number - 1) * page_size)
            .limit(page_size)
        )
        items = await self._fetch(stmt)
        return Page(
            items=items,
            total_count=total,
            page_number=page_number,
            page_size=page_size,
        )

    async def _get_tracked(self, entity_id: UUID) -> TModel:
        model = await self.session.get(self.model, entity_id)
        if model is None:
            raise ValueError(f"{self.model.__name__} {entity_id} is not persisted")
        return model

    # -------------------------------------------------------------------------
    # Repository protocol
    # -------------------------------------------------------------------------

    async def get_by_id(self, entity_id: UUID) -> TEntity | None:
        """Find entity by ID.

        Returns:
            Domain entity if found and not deleted, None otherwise.
        """
        stmt = select(self.model).where(self.model.id == entity_id, self._not_deleted())
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._to_domain(model)

    async def get_all(self) -> list[TEntity]:
        return await self._fetch(self._select_active())

    async def get_paged(self, page_number: int, page_size: int) -> Page[TEntity]:
        """Return one page in the stable sort order.

        Raises:
            ValueError: If page_number < 1 or page_size < 1.
        """
        return await self._page(page_number, page_size)

    async def find(self, *predicates: ColumnElement[bool]) -> list[TEntity]:
        return await self._fetch(self._select_active(*predicates))

    async def add(self, entity: TEntity) -> None:
        self.session.add(self._to_model(entity))

    async def update(self, entity: TEntity) -> None:
        """Stage changes of an entity loaded earlier.

        Raises:
            ValueError: If the entity was never persisted.
        """
        model = await self._get_tracked(entity.id)  # type: ignore[attr-defined]
        was_deleted, deleted_at = model.is_deleted, model.deleted_at
        self._apply(entity, model)
        if was_deleted:
            model.is_deleted = True
            model.deleted_at = deleted_at

    async def remove(self, entity: TEntity) -> None:
        """Stage a logical delete."""
        model = await self._get_tracked(entity.id)  # type: ignore[attr-defined]
        if model.is_deleted:
            return
        deleted_at = getattr(entity, "deleted_at", None) or datetime.now(UTC)
        model.is_deleted = True
        model.deleted_at = deleted_at
        model.updated_at = deleted_at

    async def exists(self, entity_id: UUID) -> bool:
        stmt = (
            select(self.model.id)
            .where(self.model.id == entity_id, self._not_deleted())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def count(self, *predicates: ColumnElement[bool]) -> int:
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(self._not_deleted(), *predicates)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
