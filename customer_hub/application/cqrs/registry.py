"""CQRS Registry - Single Source of Truth for Commands and Queries.

This registry catalogs ALL commands and queries with their metadata and the
factory that builds each handler from a RequestScope.

Used for:
- Building the HandlerRegistry at startup (explicit wiring, no discovery)
- Validation tests (verify no drift between requests/handlers)

Adding new commands/queries:
1. Define command/query dataclass in customer_commands.py/customer_queries.py
2. Create handler class in handlers/ directory
3. Add a factory and an entry to COMMAND_REGISTRY or QUERY_REGISTRY below
4. Run tests - they'll tell you what's missing
"""

from customer_hub.application.commands.customer_commands import (
    ActivateCustomer,
    CreateCustomer,
    DeleteCustomer,
    PromoteCustomerToVip,
    SuspendCustomer,
    UpdateCustomer,
)
from customer_hub.application.commands.handlers.create_customer_handler import (
    CreateCustomerHandler,
)
from customer_hub.application.commands.handlers.customer_status_handlers import (
    ActivateCustomerHandler,
    PromoteCustomerToVipHandler,
    SuspendCustomerHandler,
)
from customer_hub.application.commands.handlers.delete_customer_handler import (
    DeleteCustomerHandler,
)
from customer_hub.application.commands.handlers.update_customer_handler import (
    UpdateCustomerHandler,
)
from customer_hub.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)
from customer_hub.application.cqrs.scope import RequestScope
from customer_hub.application.dtos import CustomerResult
from customer_hub.application.queries.customer_queries import (
    GetCustomerById,
    ListVipCustomers,
    SearchCustomers,
)
from customer_hub.application.queries.handlers.get_customer_handler import (
    GetCustomerByIdHandler,
)
from customer_hub.application.queries.handlers.list_vip_customers_handler import (
    ListVipCustomersHandler,
)
from customer_hub.application.queries.handlers.search_customers_handler import (
    SearchCustomersHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# Handler factories (one per request, built per dispatch)
# ═══════════════════════════════════════════════════════════════════════════


def create_customer_handler(scope: RequestScope) -> CreateCustomerHandler:
    return CreateCustomerHandler(
        uow=scope.uow, event_bus=scope.event_bus, logger=scope.logger
    )


def update_customer_handler(scope: RequestScope) -> UpdateCustomerHandler:
    return UpdateCustomerHandler(
        uow=scope.uow, event_bus=scope.event_bus, logger=scope.logger
    )


def promote_customer_to_vip_handler(
    scope: RequestScope,
) -> PromoteCustomerToVipHandler:
    return PromoteCustomerToVipHandler(
        uow=scope.uow, event_bus=scope.event_bus, logger=scope.logger
    )


def suspend_customer_handler(scope: RequestScope) -> SuspendCustomerHandler:
    return SuspendCustomerHandler(
        uow=scope.uow, event_bus=scope.event_bus, logger=scope.logger
    )


def activate_customer_handler(scope: RequestScope) -> ActivateCustomerHandler:
    return ActivateCustomerHandler(
        uow=scope.uow, event_bus=scope.event_bus, logger=scope.logger
    )


def delete_customer_handler(scope: RequestScope) -> DeleteCustomerHandler:
    return DeleteCustomerHandler(
        uow=scope.uow, event_bus=scope.event_bus, logger=scope.logger
    )


def get_customer_by_id_handler(scope: RequestScope) -> GetCustomerByIdHandler:
    return GetCustomerByIdHandler(uow=scope.uow)


def search_customers_handler(scope: RequestScope) -> SearchCustomersHandler:
    return SearchCustomersHandler(uow=scope.uow)


def list_vip_customers_handler(scope: RequestScope) -> ListVipCustomersHandler:
    return ListVipCustomersHandler(uow=scope.uow)


# ═══════════════════════════════════════════════════════════════════════════
# Command Registry
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    CommandMetadata(
        command_class=CreateCustomer,
        handler_class=CreateCustomerHandler,
        handler_factory=create_customer_handler,
        category=CQRSCategory.CUSTOMER_LIFECYCLE,
        has_result_dto=True,
        result_dto_class=CustomerResult,
        description="Register a new Regular, Active customer",
    ),
    CommandMetadata(
        command_class=UpdateCustomer,
        handler_class=UpdateCustomerHandler,
        handler_factory=update_customer_handler,
        category=CQRSCategory.CUSTOMER_LIFECYCLE,
        has_result_dto=True,
        result_dto_class=CustomerResult,
        description="Replace customer name and contact details",
    ),
    CommandMetadata(
        command_class=PromoteCustomerToVip,
        handler_class=PromoteCustomerToVipHandler,
        handler_factory=promote_customer_to_vip_handler,
        category=CQRSCategory.CUSTOMER_STATUS,
        has_result_dto=True,
        result_dto_class=CustomerResult,
        description="Promote customer to VIP tier",
    ),
    CommandMetadata(
        command_class=SuspendCustomer,
        handler_class=SuspendCustomerHandler,
        handler_factory=suspend_customer_handler,
        category=CQRSCategory.CUSTOMER_STATUS,
        has_result_dto=True,
        result_dto_class=CustomerResult,
        description="Suspend customer account",
    ),
    CommandMetadata(
        command_class=ActivateCustomer,
        handler_class=ActivateCustomerHandler,
        handler_factory=activate_customer_handler,
        category=CQRSCategory.CUSTOMER_STATUS,
        has_result_dto=True,
        result_dto_class=CustomerResult,
        description="Reactivate a suspended or inactive customer",
    ),
    CommandMetadata(
        command_class=DeleteCustomer,
        handler_class=DeleteCustomerHandler,
        handler_factory=delete_customer_handler,
        category=CQRSCategory.CUSTOMER_LIFECYCLE,
        description="Logically delete a customer",
    ),
]

# ═══════════════════════════════════════════════════════════════════════════
# Query Registry
# ═══════════════════════════════════════════════════════════════════════════

QUERY_REGISTRY: list[QueryMetadata] = [
    QueryMetadata(
        query_class=GetCustomerById,
        handler_class=GetCustomerByIdHandler,
        handler_factory=get_customer_by_id_handler,
        category=CQRSCategory.CUSTOMER_READ,
        description="Fetch a single non-deleted customer",
    ),
    QueryMetadata(
        query_class=SearchCustomers,
        handler_class=SearchCustomersHandler,
        handler_factory=search_customers_handler,
        category=CQRSCategory.CUSTOMER_READ,
        is_paginated=True,
        description="Filter and page customers",
    ),
    QueryMetadata(
        query_class=ListVipCustomers,
        handler_class=ListVipCustomersHandler,
        handler_factory=list_vip_customers_handler,
        category=CQRSCategory.CUSTOMER_READ,
        description="List VIP customers ordered by name",
    ),
]


def get_all_commands() -> list[type]:
    """Get all registered command classes."""
    return [meta.command_class for meta in COMMAND_REGISTRY]


def get_all_queries() -> list[type]:
    """Get all registered query classes."""
    return [meta.query_class for meta in QUERY_REGISTRY]


def get_paginated_queries() -> list[type]:
    """Get all queries that support pagination."""
    return [meta.query_class for meta in QUERY_REGISTRY if meta.is_paginated]

