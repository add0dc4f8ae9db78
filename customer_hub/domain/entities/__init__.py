"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from customer_hub.domain.entities.customer import Customer

__all__ = ["Customer"]
