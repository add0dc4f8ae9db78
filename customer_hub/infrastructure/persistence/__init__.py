"""Persistence adapters (SQLAlchemy)."""

from customer_hub.infrastructure.persistence.database import Database
from customer_hub.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = ["Database", "SqlAlchemyUnitOfWork"]
