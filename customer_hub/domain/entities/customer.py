"""Customer domain entity.

Aggregate root of the customer-management domain.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Satisfies the Identified, Auditable and SoftDeletable capabilities
      structurally (no base-entity inheritance)
    - State transitions return Result types; invalid transitions leave the
      entity untouched
    - Logical deletion is final: nothing reverses mark_deleted()

Usage:
    from customer_hub.domain.entities import Customer
    from customer_hub.domain.value_objects import Email, PhoneNumber

    customer = Customer.create(
        name="John Doe",
        email=Email("john@example.com"),
        phone=PhoneNumber("+1234567890"),
    )
    customer.promote_to_vip()
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from uuid_extensions import uuid7

from customer_hub.core.errors import BusinessRuleError
from customer_hub.core.result import Failure, Result, Success
from customer_hub.domain.enums import CustomerStatus, CustomerType
from customer_hub.domain.errors import CustomerError
from customer_hub.domain.validators import NAME_MAX_LENGTH
from customer_hub.domain.value_objects import Email, PhoneNumber

# Discount rate per customer type
DISCOUNT_RATES: dict[CustomerType, Decimal] = {
    CustomerType.VIP: Decimal("0.15"),
    CustomerType.PREMIUM: Decimal("0.10"),
    CustomerType.REGULAR: Decimal("0"),
}


@dataclass
class Customer:
    """Customer aggregate with identity and lifecycle rules.

    Business Rules:
        - Name is required and at most 100 characters
        - New customers are Regular and Active
        - Promoting an existing VIP is rejected
        - Suspending a suspended customer (or activating an active one) is rejected
        - Deleted customers accept no further transitions

    Attributes:
        id: Unique customer identifier (UUIDv7).
        name: Display name.
        email: Validated email (unique among non-deleted customers).
        phone: Validated phone number.
        type: Customer tier.
        status: Lifecycle status.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC, None until first change).
        is_deleted: Logical deletion flag.
        deleted_at: When the customer was logically deleted.
        version: Optimistic concurrency counter maintained by persistence.
    """

    id: UUID
    name: str
    email: Email
    phone: PhoneNumber
    type: CustomerType = CustomerType.REGULAR
    status: CustomerStatus = CustomerStatus.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None
    is_deleted: bool = False
    deleted_at: datetime | None = None
    version: int = 0

    def __post_init__(self) -> None:
        """Enforce construction invariants.

        Raises:
            ValueError: If name is blank or too long.
        """
        if not self.name or not self.name.strip():
            raise ValueError(CustomerError.INVALID_NAME)
        if len(self.name) > NAME_MAX_LENGTH:
            raise ValueError(CustomerError.NAME_TOO_LONG)

    @classmethod
    def create(cls, name: str, email: Email, phone: PhoneNumber) -> "Customer":
        """Create a new Regular, Active customer with a generated id.

        Args:
            name: Display name (stripped).
            email: Validated email.
            phone: Validated phone number.

        Returns:
            New Customer entity (not yet persisted).

        Raises:
            ValueError: If name violates construction invariants.
        """
        return cls(
            id=uuid7(),
            name=name.strip(),
            email=email,
            phone=phone,
        )

    # -------------------------------------------------------------------------
    # Query methods
    # -------------------------------------------------------------------------

    def is_vip(self) -> bool:
        """Check if customer is VIP."""
        return self.type == CustomerType.VIP

    def is_active(self) -> bool:
        """Check if customer is active and not deleted."""
        return self.status == CustomerStatus.ACTIVE and not self.is_deleted

    def calculate_discount(self, amount: Decimal) -> Decimal:
        """Calculate the discount this customer receives on an amount.

        Args:
            amount: Order amount.

        Returns:
            Discount amount (VIP 15%, Premium 10%, Regular 0).

        Example:
            >>> customer.type = CustomerType.VIP
            >>> customer.calculate_discount(Decimal("100"))
            Decimal('15.00')
        """
        return amount * DISCOUNT_RATES[self.type]

    # -------------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------------

    def update_contact_info(
        self, name: str, email: Email, phone: PhoneNumber
    ) -> Result[None, BusinessRuleError]:
        """Replace name and contact details.

        Returns:
            Success(None): Update applied.
            Failure(BusinessRuleError): Customer is deleted.

        Raises:
            ValueError: If the new name violates construction invariants.
        """
        if self.is_deleted:
            return Failure(error=CustomerError.already_deleted())

        new_name = name.strip()
        if not new_name:
            raise ValueError(CustomerError.INVALID_NAME)
        if len(new_name) > NAME_MAX_LENGTH:
            raise ValueError(CustomerError.NAME_TOO_LONG)

        self.name = new_name
        self.email = email
        self.phone = phone
        self._touch()
        return Success(value=None)

    def promote_to_vip(self) -> Result[None, BusinessRuleError]:
        """Promote customer to VIP.

        Returns:
            Success(None): Customer is now VIP.
            Failure(BusinessRuleError): Already VIP or deleted.
        """
        if self.is_deleted:
            return Failure(error=CustomerError.already_deleted())
        if self.type == CustomerType.VIP:
            return Failure(error=CustomerError.already_vip())

        self.type = CustomerType.VIP
        self._touch()
        return Success(value=None)

    def suspend(self) -> Result[None, BusinessRuleError]:
        """Suspend customer account.

        Returns:
            Success(None): Customer is now suspended.
            Failure(BusinessRuleError): Already suspended or deleted.
        """
        if self.is_deleted:
            return Failure(error=CustomerError.already_deleted())
        if self.status == CustomerStatus.SUSPENDED:
            return Failure(error=CustomerError.already_suspended())

        self.status = CustomerStatus.SUSPENDED
        self._touch()
        return Success(value=None)

    def activate(self) -> Result[None, BusinessRuleError]:
        """Activate customer account.

        Returns:
            Success(None): Customer is now active.
            Failure(BusinessRuleError): Already active or deleted.
        """
        if self.is_deleted:
            return Failure(error=CustomerError.already_deleted())
        if self.status == CustomerStatus.ACTIVE:
            return Failure(error=CustomerError.already_active())

        self.status = CustomerStatus.ACTIVE
        self._touch()
        return Success(value=None)

    def mark_deleted(self) -> Result[None, BusinessRuleError]:
        """Logically delete the customer (irreversible).

        Returns:
            Success(None): Customer flagged as deleted.
            Failure(BusinessRuleError): Customer was already deleted.
        """
        if self.is_deleted:
            return Failure(error=CustomerError.already_deleted())

        now = datetime.now(UTC)
        self.is_deleted = True
        self.deleted_at = now
        self.updated_at = now
        return Success(value=None)

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
