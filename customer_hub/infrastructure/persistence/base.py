"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Adds updated_at
- SoftDeleteMixin: Adds is_deleted / deleted_at (logical deletion)
- BaseMutableModel: Recommended base for mutable models (combines above)

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities should NOT inherit from this
- Domain entities are mapped to/from database models by repositories

Architecture:
    BaseModel (id, created_at)
        ↑
        └── BaseMutableModel (+ updated_at, is_deleted, deleted_at)
            └── CustomerModel

Note: Uses SQLAlchemy's generic Uuid type so the same models run on
PostgreSQL (production) and SQLite (development and tests).
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import Boolean, DateTime, Uuid, false
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides common fields that ALL database models need:
    - id: UUID primary key (UUIDv7 assigned by the domain entity)
    - created_at: Creation timestamp (UTC, copied from the domain entity)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Mixin for mutable models that track updates.

    updated_at stays NULL until the first modification; the domain entity
    owns the value.
    """

    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )


class SoftDeleteMixin:
    """Mixin for logically deleted rows.

    Repositories exclude rows with is_deleted = true from every read and
    never reset the flag once set.
    """

    is_deleted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )


class BaseMutableModel(SoftDeleteMixin, TimestampMixin, BaseModel):
    """Base class for mutable, soft-deletable database models.

    Provides:
        - id, created_at (from BaseModel)
        - updated_at (from TimestampMixin)
        - is_deleted, deleted_at (from SoftDeleteMixin)
    """

    __abstract__ = True
