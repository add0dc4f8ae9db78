"""Database models.

Import every model here so BaseModel.metadata knows all tables (used by
create_all and by Alembic autogenerate).
"""

from customer_hub.infrastructure.persistence.models.customer import CustomerModel

__all__ = ["CustomerModel"]
