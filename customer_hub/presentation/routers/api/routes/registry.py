"""API Route Registry - Single Source of Truth for customer routes.

ROUTE_REGISTRY is the authoritative list of customer endpoints. Entries are
registered in order, so ``/customers/vip`` is declared before
``/customers/{customer_id}``.

Usage:
    router = APIRouter(prefix="/api")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from customer_hub.presentation.routers.api.customers import (
    activate_customer,
    create_customer,
    delete_customer,
    get_customer,
    list_vip_customers,
    promote_customer,
    search_customers,
    suspend_customer,
    update_customer,
)
from customer_hub.presentation.routers.api.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)
from customer_hub.schemas.customer_schemas import (
    CustomerPageResponse,
    CustomerResponse,
)

_TAGS = ["Customers"]

_VALIDATION_ERROR = ErrorSpec(status=400, description="Validation error")
_NOT_FOUND = ErrorSpec(status=404, description="Customer not found")
_STATE_CONFLICT = ErrorSpec(
    status=409, description="Transition not allowed in the current state"
)


ROUTE_REGISTRY: list[RouteMetadata] = [
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/customers/vip",
        handler=list_vip_customers,
        resource="customers",
        tags=_TAGS,
        summary="List VIP customers",
        operation_id="list_vip_customers",
        response_model=list[CustomerResponse],
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/customers",
        handler=search_customers,
        resource="customers",
        tags=_TAGS,
        summary="Search customers",
        description="Filter by name, email, type and status. Ordered by name.",
        operation_id="search_customers",
        response_model=CustomerPageResponse,
        errors=[_VALIDATION_ERROR],
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/customers",
        handler=create_customer,
        resource="customers",
        tags=_TAGS,
        summary="Create customer",
        operation_id="create_customer",
        response_model=CustomerResponse,
        status_code=201,
        errors=[
            _VALIDATION_ERROR,
            ErrorSpec(status=409, description="Email already registered"),
        ],
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/customers/{customer_id}",
        handler=get_customer,
        resource="customers",
        tags=_TAGS,
        summary="Get customer",
        operation_id="get_customer",
        response_model=CustomerResponse,
        errors=[_VALIDATION_ERROR, _NOT_FOUND],
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/customers/{customer_id}",
        handler=update_customer,
        resource="customers",
        tags=_TAGS,
        summary="Update customer",
        description="Replace name, email and phone.",
        operation_id="update_customer",
        response_model=CustomerResponse,
        errors=[
            _VALIDATION_ERROR,
            _NOT_FOUND,
            ErrorSpec(status=409, description="Email already registered"),
        ],
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/customers/{customer_id}/promote",
        handler=promote_customer,
        resource="customers",
        tags=_TAGS,
        summary="Promote customer to VIP",
        operation_id="promote_customer",
        response_model=CustomerResponse,
        errors=[_NOT_FOUND, _STATE_CONFLICT],
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/customers/{customer_id}/suspend",
        handler=suspend_customer,
        resource="customers",
        tags=_TAGS,
        summary="Suspend customer",
        operation_id="suspend_customer",
        response_model=CustomerResponse,
        errors=[_NOT_FOUND, _STATE_CONFLICT],
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/customers/{customer_id}/activate",
        handler=activate_customer,
        resource="customers",
        tags=_TAGS,
        summary="Activate customer",
        operation_id="activate_customer",
        response_model=CustomerResponse,
        errors=[_NOT_FOUND, _STATE_CONFLICT],
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/customers/{customer_id}",
        handler=delete_customer,
        resource="customers",
        tags=_TAGS,
        summary="Delete customer",
        description="Soft delete. The customer disappears from every read.",
        operation_id="delete_customer",
        status_code=204,
        errors=[_NOT_FOUND],
    ),
]
