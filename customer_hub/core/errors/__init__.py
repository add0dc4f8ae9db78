"""Core errors package.

Usage:
    from customer_hub.core.errors import DomainError, ValidationError, NotFoundError
"""

from customer_hub.core.errors.common_errors import (
    BusinessRuleError,
    ConflictError,
    NotFoundError,
    ValidationError,
    ValidationFailedError,
)
from customer_hub.core.errors.domain_error import DomainError
from customer_hub.core.errors.infrastructure_errors import (
    ConcurrencyError,
    DuplicateKeyError,
    InfrastructureError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "ValidationFailedError",
    "NotFoundError",
    "ConflictError",
    "BusinessRuleError",
    "InfrastructureError",
    "DuplicateKeyError",
    "ConcurrencyError",
]
