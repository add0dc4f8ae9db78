"""Application layer error types.

This module defines application-level errors that wrap domain errors with
the category the presentation layer needs to choose an HTTP status.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    to_application_error: Classify a DomainError returned by the dispatcher
"""

from dataclasses import dataclass
from enum import Enum

from customer_hub.core.errors import (
    BusinessRuleError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
    ValidationFailedError,
)


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    One code per failure category a request can end in.
    """

    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    BUSINESS_RULE_VIOLATION = "business_rule_violation"
    REQUEST_FAILED = "request_failed"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Customer not found",
        ...     domain_error=not_found_error,
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @property
    def field_errors(self) -> tuple[ValidationError, ...]:
        """Field-level violations carried by the wrapped error, if any."""
        if isinstance(self.domain_error, ValidationFailedError):
            return self.domain_error.errors
        if isinstance(self.domain_error, ValidationError):
            return (self.domain_error,)
        return ()


def to_application_error(error: DomainError) -> ApplicationError:
    """Classify a DomainError into its application category.

    Args:
        error: Error taken from a Failure.

    Returns:
        ApplicationError wrapping the original error.
    """
    details: dict[str, str] | None = None
    match error:
        case ValidationFailedError() | ValidationError():
            code = ApplicationErrorCode.VALIDATION_FAILED
        case NotFoundError():
            code = ApplicationErrorCode.NOT_FOUND
            details = {
                "resource_type": error.resource_type,
                "resource_id": error.resource_id,
            }
        case ConflictError():
            code = ApplicationErrorCode.CONFLICT
            if error.conflicting_field:
                details = {"field": error.conflicting_field}
        case BusinessRuleError():
            code = ApplicationErrorCode.BUSINESS_RULE_VIOLATION
            if error.rule:
                details = {"rule": error.rule}
        case _:
            code = ApplicationErrorCode.REQUEST_FAILED

    return ApplicationError(
        code=code,
        message=error.message,
        domain_error=error,
        details=details,
    )
