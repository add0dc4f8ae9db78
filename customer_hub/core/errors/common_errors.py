"""Common error classes used across all layers.

Error Types:
- ValidationError: A single field-level rule violation
- ValidationFailedError: Ordered collection of rule violations for one request
- NotFoundError: Resource absent (or soft-deleted)
- ConflictError: Uniqueness or concurrency conflict
- BusinessRuleError: An entity rejected an invalid state transition

Usage:
    from customer_hub.core.errors import NotFoundError
    from customer_hub.core.enums import ErrorCode
    from customer_hub.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.CUSTOMER_NOT_FOUND,
        message="Customer not found",
        resource_type="Customer",
        resource_id=str(customer_id),
    ))
"""

from dataclasses import dataclass, field

from customer_hub.core.enums import ErrorCode
from customer_hub.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure for a single field.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation (None for request-wide rules).
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationFailedError(DomainError):
    """One or more field-level rule violations for a request.

    Violations keep the order in which validators and rules were declared.

    Attributes:
        code: Always VALIDATION_FAILED unless overridden.
        message: Summary message.
        errors: Ordered field-level violations.
    """

    code: ErrorCode = ErrorCode.VALIDATION_FAILED
    message: str = "Validation failed"
    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    @property
    def messages(self) -> list[str]:
        """Violation messages in declaration order."""
        return [error.message for error in self.errors]


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Customer, etc.).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate value, concurrent modification).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email, version, etc.).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class BusinessRuleError(DomainError):
    """Domain rule violation (entity rejected a state transition).

    Attributes:
        resource_type: Type of entity that rejected the transition.
        rule: Short name of the violated rule.
    """

    resource_type: str
    rule: str | None = None
