"""Infrastructure exceptions.

Unlike DomainError values, these are real exceptions: they signal failures
the request pipeline cannot express as an expected outcome (storage
constraint violations, stale writes, dispatcher misconfiguration). Handlers
translate the ones they understand into Failure values; everything else
propagates to the transport boundary and becomes a generic 500.
"""


class InfrastructureError(Exception):
    """Base class for infrastructure failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateKeyError(InfrastructureError):
    """A unique constraint rejected a write.

    Attributes:
        field: Column protected by the violated constraint, when known.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ConcurrencyError(InfrastructureError):
    """A row changed between load and commit (optimistic concurrency)."""
