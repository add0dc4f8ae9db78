"""Domain error constants."""

from customer_hub.domain.errors.customer_error import CustomerError

__all__ = ["CustomerError"]
