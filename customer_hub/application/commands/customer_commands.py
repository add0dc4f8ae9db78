"""Customer commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Validators declared per command run before the handler
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateCustomer:
    """Register a new customer.

    New customers start as Regular and Active.

    Attributes:
        name: Display name (letters, spaces and .'- only, max 100).
        email: Email address (unique among non-deleted customers).
        phone: Phone number in E.164-like format.

    Example:
        >>> command = CreateCustomer(
        ...     name="John Doe",
        ...     email="john@example.com",
        ...     phone="+1234567890",
        ... )
        >>> result = await dispatcher.send(command, scope)
    """

    name: str
    email: str
    phone: str


@dataclass(frozen=True, kw_only=True)
class UpdateCustomer:
    """Replace a customer's name and contact details.

    Attributes:
        customer_id: Customer to update.
        name: New display name.
        email: New email (unique among other non-deleted customers).
        phone: New phone number.
    """

    customer_id: UUID
    name: str
    email: str
    phone: str


@dataclass(frozen=True, kw_only=True)
class PromoteCustomerToVip:
    """Change customer tier to VIP (rejected when already VIP)."""

    customer_id: UUID


@dataclass(frozen=True, kw_only=True)
class SuspendCustomer:
    customer_id: UUID


@dataclass(frozen=True, kw_only=True)
class ActivateCustomer:
    customer_id: UUID


@dataclass(frozen=True, kw_only=True)
class DeleteCustomer:
    """Logically delete a customer.

    The customer disappears from every read afterwards. Not reversible.
    """

    customer_id: UUID
