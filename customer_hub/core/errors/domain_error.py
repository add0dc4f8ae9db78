"""Failure payload base for customer-hub.

Every expected outcome that is not a success travels as
``Failure(error=<DomainError subclass>)``. The subclasses in
``common_errors`` cover the four recoverable categories: field validation,
not-found (absent or soft-deleted customers), conflicts (duplicate email,
stale version) and rejected lifecycle transitions. Handlers and behaviors
return them; the HTTP layer maps each subclass to a status code.

These are plain frozen dataclasses, never raised. Storage and wiring faults
are exceptions instead (see ``infrastructure_errors``).

Usage:
    from customer_hub.core.enums import ErrorCode
    from customer_hub.core.errors import BusinessRuleError
    from customer_hub.core.result import Failure

    return Failure(error=BusinessRuleError(
        code=ErrorCode.CUSTOMER_ALREADY_VIP,
        message="Customer is already VIP",
        resource_type="Customer",
        rule="promote_to_vip",
    ))
"""

from dataclasses import dataclass

from customer_hub.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Fields shared by every Failure payload.

    Attributes:
        code: Stable machine-readable code, echoed in Problem Details.
        message: Text safe to show to API clients.
        details: Extra string context for logs and error bodies.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
