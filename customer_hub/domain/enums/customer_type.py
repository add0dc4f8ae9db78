"""Customer type enumeration.

The type drives discount rules:
    - Regular: no discount (default for new customers)
    - Premium: 10% discount
    - Vip: 15% discount
"""

from enum import Enum


class CustomerType(str, Enum):
    """Customer tier."""

    REGULAR = "Regular"
    PREMIUM = "Premium"
    VIP = "Vip"

    @classmethod
    def values(cls) -> list[str]:
        """Return all type values as strings."""
        return [member.value for member in cls]
