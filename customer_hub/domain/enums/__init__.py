"""Domain enums."""

from customer_hub.domain.enums.customer_status import CustomerStatus
from customer_hub.domain.enums.customer_type import CustomerType

__all__ = ["CustomerStatus", "CustomerType"]
