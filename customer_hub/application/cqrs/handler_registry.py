"""Explicit request type to handler factory table.

No discovery or reflection: every request type is registered by hand (from
the CQRS registry tables) and the table is verified once at startup.
"""

from collections.abc import Iterable

from customer_hub.application.cqrs.exceptions import (
    HandlerNotFoundError,
    HandlerRegistrationError,
)
from customer_hub.application.cqrs.metadata import (
    CommandMetadata,
    HandlerFactory,
    QueryMetadata,
)


class HandlerRegistry:
    """Maps each concrete request type to exactly one handler factory.

    Example:
        >>> registry = HandlerRegistry()
        >>> registry.register(GetCustomerById, get_customer_by_id_handler)
        >>> registry.ensure_complete([GetCustomerById])
        >>> factory = registry.resolve(GetCustomerById)
    """

    def __init__(self) -> None:
        self._factories: dict[type, HandlerFactory] = {}

    def register(self, request_type: type, factory: HandlerFactory) -> None:
        """Register the handler factory for a request type.

        Raises:
            HandlerRegistrationError: If the type already has a handler.
        """
        if request_type in self._factories:
            raise HandlerRegistrationError(
                f"Handler already registered for {request_type.__name__}"
            )
        self._factories[request_type] = factory

    def resolve(self, request_type: type) -> HandlerFactory:
        """Return the handler factory for a request type.

        Raises:
            HandlerNotFoundError: If the type has no handler.
        """
        try:
            return self._factories[request_type]
        except KeyError:
            raise HandlerNotFoundError(request_type) from None

    def ensure_complete(self, request_types: Iterable[type]) -> None:
        """Verify every expected request type has a handler.

        Raises:
            HandlerRegistrationError: Listing every type without a handler.
        """
        missing = sorted(t.__name__ for t in request_types if t not in self._factories)
        if missing:
            raise HandlerRegistrationError(
                f"No handler registered for: {', '.join(missing)}"
            )

    def __contains__(self, request_type: type) -> bool:
        return request_type in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    @classmethod
    def from_metadata(
        cls,
        commands: Iterable[CommandMetadata],
        queries: Iterable[QueryMetadata],
    ) -> "HandlerRegistry":
        """Build a registry from CQRS registry tables."""
        registry = cls()
        for command in commands:
            registry.register(command.command_class, command.handler_factory)
        for query in queries:
            registry.register(query.query_class, query.handler_factory)
        return registry
