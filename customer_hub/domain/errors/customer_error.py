"""Customer domain errors.

Defines customer-specific error messages and factories for the
BusinessRuleError values returned by Customer state transitions.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from customer_hub.domain.errors import CustomerError
    from customer_hub.core.result import Failure

    if self.type == CustomerType.VIP:
        return Failure(error=CustomerError.already_vip())
"""

from uuid import UUID

from customer_hub.core.enums import ErrorCode
from customer_hub.core.errors import (
    BusinessRuleError,
    ConflictError,
    NotFoundError,
    ValidationError,
    ValidationFailedError,
)

RESOURCE_TYPE = "Customer"


class CustomerError:
    """Customer error constants and BusinessRuleError factories.

    Error Categories:
        - Construction errors: INVALID_NAME
        - State errors: ALREADY_VIP, ALREADY_SUSPENDED, ALREADY_ACTIVE, ALREADY_DELETED
        - Lookup errors: NOT_FOUND, EMAIL_ALREADY_EXISTS
    """

    INVALID_NAME = "Name cannot be empty"
    NAME_TOO_LONG = "Name cannot exceed 100 characters"

    ALREADY_VIP = "Customer is already VIP"
    ALREADY_SUSPENDED = "Customer is already suspended"
    ALREADY_ACTIVE = "Customer is already active"
    ALREADY_DELETED = "Customer is already deleted"
    DELETED = "Customer has been deleted"

    NOT_FOUND = "Customer not found"
    EMAIL_ALREADY_EXISTS = "Email already registered"
    CONCURRENT_MODIFICATION = "Customer was modified by another request"

    @staticmethod
    def already_vip() -> BusinessRuleError:
        """Promotion rejected: customer is already VIP."""
        return BusinessRuleError(
            code=ErrorCode.CUSTOMER_ALREADY_VIP,
            message=CustomerError.ALREADY_VIP,
            resource_type=RESOURCE_TYPE,
            rule="promote_to_vip",
        )

    @staticmethod
    def already_suspended() -> BusinessRuleError:
        """Suspension rejected: customer is already suspended."""
        return BusinessRuleError(
            code=ErrorCode.CUSTOMER_ALREADY_SUSPENDED,
            message=CustomerError.ALREADY_SUSPENDED,
            resource_type=RESOURCE_TYPE,
            rule="suspend",
        )

    @staticmethod
    def already_active() -> BusinessRuleError:
        """Activation rejected: customer is already active."""
        return BusinessRuleError(
            code=ErrorCode.CUSTOMER_ALREADY_ACTIVE,
            message=CustomerError.ALREADY_ACTIVE,
            resource_type=RESOURCE_TYPE,
            rule="activate",
        )

    @staticmethod
    def already_deleted() -> BusinessRuleError:
        """Any transition on a logically deleted customer."""
        return BusinessRuleError(
            code=ErrorCode.CUSTOMER_ALREADY_DELETED,
            message=CustomerError.ALREADY_DELETED,
            resource_type=RESOURCE_TYPE,
            rule="deleted_is_final",
        )

    @staticmethod
    def not_found(customer_id: UUID) -> NotFoundError:
        """Customer absent or logically deleted."""
        return NotFoundError(
            code=ErrorCode.CUSTOMER_NOT_FOUND,
            message=CustomerError.NOT_FOUND,
            resource_type=RESOURCE_TYPE,
            resource_id=str(customer_id),
        )

    @staticmethod
    def email_conflict() -> ConflictError:
        """Another non-deleted customer already uses the email."""
        return ConflictError(
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            message=CustomerError.EMAIL_ALREADY_EXISTS,
            resource_type=RESOURCE_TYPE,
            conflicting_field="email",
        )

    @staticmethod
    def concurrency_conflict() -> ConflictError:
        """Customer row changed between load and commit."""
        return ConflictError(
            code=ErrorCode.CONCURRENCY_CONFLICT,
            message=CustomerError.CONCURRENT_MODIFICATION,
            resource_type=RESOURCE_TYPE,
            conflicting_field="version",
        )

    @staticmethod
    def invalid_input(message: str) -> ValidationFailedError:
        """Input rejected by a value object or entity invariant."""
        return ValidationFailedError(
            errors=(ValidationError(code=ErrorCode.INVALID_VALUE, message=message),)
        )
