"""SQLAlchemy repository adapters."""

from customer_hub.infrastructure.persistence.repositories.customer_repository import (
    CustomerRepository,
)
from customer_hub.infrastructure.persistence.repositories.sqlalchemy_repository import (
    SqlAlchemyRepository,
)

__all__ = ["CustomerRepository", "SqlAlchemyRepository"]
