"""Customer database model.

Indexes:
    - ix_customers_email_active: UNIQUE (email) among non-deleted rows
      (partial index, PostgreSQL and SQLite predicates). A deleted
      customer's email can be registered again.
    - ix_customers_name: (name) for the default sort order and search.

Concurrency:
    version is SQLAlchemy's version_id_col: every UPDATE checks and bumps
    it, and a stale write raises StaleDataError at flush time.
"""

from sqlalchemy import Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from customer_hub.infrastructure.persistence.base import BaseMutableModel


class CustomerModel(BaseMutableModel):
    """Customer row.

    Fields:
        id, created_at, updated_at, is_deleted, deleted_at (from BaseMutableModel)
        name: Display name (max 100)
        email: Normalized lowercase email (max 255)
        phone: Phone number (max 20)
        type: CustomerType value (Regular, Premium, Vip)
        status: CustomerStatus value (Active, Inactive, Suspended)
        version: Optimistic concurrency counter
    """

    __tablename__ = "customers"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="Regular")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Active")
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        Index(
            "ix_customers_email_active",
            "email",
            unique=True,
            postgresql_where=text("is_deleted = false"),
            sqlite_where=text("is_deleted = 0"),
        ),
        Index("ix_customers_name", "name"),
    )
