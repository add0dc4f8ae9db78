"""Customer status enumeration."""

from enum import Enum


class CustomerStatus(str, Enum):
    """Lifecycle status of a customer account.

    New customers start Active. Suspended customers can be re-activated.
    """

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    SUSPENDED = "Suspended"

    @classmethod
    def values(cls) -> list[str]:
        """Return all status values as strings."""
        return [member.value for member in cls]
