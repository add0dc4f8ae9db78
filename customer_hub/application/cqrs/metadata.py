"""CQRS Metadata Types.

Dataclasses and enums for CQRS registry metadata.
These types define the structure of command and query registry entries.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
- Explicit wiring - every entry names the factory that builds its handler
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from customer_hub.application.cqrs.scope import RequestScope
from customer_hub.core.result import Result


class CQRSCategory(str, Enum):
    """Categories for CQRS commands and queries."""

    CUSTOMER_LIFECYCLE = "customer_lifecycle"  # create, update, delete
    CUSTOMER_STATUS = "customer_status"  # promote, suspend, activate
    CUSTOMER_READ = "customer_read"  # lookups and searches


class RequestHandler(Protocol):
    """Anything with an async handle(request) returning a Result."""

    async def handle(self, request: Any) -> Result[Any, Any]: ...


type HandlerFactory = Callable[[RequestScope], RequestHandler]


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Attributes:
        command_class: The command dataclass (e.g., CreateCustomer).
        handler_class: The handler class (e.g., CreateCustomerHandler).
        handler_factory: Builds a handler from a RequestScope.
        category: Functional category for organization.
        has_result_dto: Whether handler returns a result DTO (vs None).
        result_dto_class: The DTO class if has_result_dto is True.
        emits_events: Whether this command publishes domain events.
        description: Human-readable description for documentation.

    Example:
        >>> CommandMetadata(
        ...     command_class=CreateCustomer,
        ...     handler_class=CreateCustomerHandler,
        ...     handler_factory=create_customer_handler,
        ...     category=CQRSCategory.CUSTOMER_LIFECYCLE,
        ...     has_result_dto=True,
        ...     result_dto_class=CustomerResult,
        ...     description="Register a new customer",
        ... )
    """

    command_class: type
    handler_class: type
    handler_factory: HandlerFactory
    category: CQRSCategory
    has_result_dto: bool = False
    result_dto_class: type | None = None
    emits_events: bool = True
    description: str = ""

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        if self.has_result_dto and self.result_dto_class is None:
            raise ValueError(
                f"Command {self.command_class.__name__} has has_result_dto=True "
                f"but no result_dto_class specified"
            )
        if not self.has_result_dto and self.result_dto_class is not None:
            raise ValueError(
                f"Command {self.command_class.__name__} has result_dto_class "
                f"but has_result_dto=False"
            )


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS registry.

    Attributes:
        query_class: The query dataclass (e.g., SearchCustomers).
        handler_class: The handler class (e.g., SearchCustomersHandler).
        handler_factory: Builds a handler from a RequestScope.
        category: Functional category for organization.
        is_paginated: Whether this query supports pagination.
        description: Human-readable description for documentation.
    """

    query_class: type
    handler_class: type
    handler_factory: HandlerFactory
    category: CQRSCategory
    is_paginated: bool = False
    description: str = ""
