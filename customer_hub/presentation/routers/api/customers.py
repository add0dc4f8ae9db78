"""Customers resource handlers.

Endpoint functions for customer management. Routes are registered via
ROUTE_REGISTRY in routes/registry.py.

Every endpoint builds one request object, sends it through the dispatcher
and maps the Result: Success to the response schema, Failure to an RFC 9457
Problem Details response.

Handlers:
    get_customer - Get a customer by ID
    create_customer - Create a customer
    update_customer - Replace contact information
    search_customers - Filtered, paged customer search
    list_vip_customers - List all VIP customers
    promote_customer - Promote to VIP
    suspend_customer - Suspend an active customer
    activate_customer - Reactivate a customer
    delete_customer - Soft-delete a customer
"""

from uuid import UUID

from fastapi import Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from customer_hub.application.commands import (
    ActivateCustomer,
    CreateCustomer,
    DeleteCustomer,
    PromoteCustomerToVip,
    SuspendCustomer,
    UpdateCustomer,
)
from customer_hub.application.cqrs import Dispatcher, RequestScope
from customer_hub.application.queries import (
    GetCustomerById,
    ListVipCustomers,
    SearchCustomers,
)
from customer_hub.core.config import settings
from customer_hub.core.container import get_dispatcher, get_request_scope
from customer_hub.core.result import Failure, Success
from customer_hub.domain.enums import CustomerStatus, CustomerType
from customer_hub.presentation.routers.api.errors import ErrorResponseBuilder
from customer_hub.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from customer_hub.schemas.customer_schemas import (
    CustomerCreateRequest,
    CustomerPageResponse,
    CustomerResponse,
    CustomerUpdateRequest,
)


async def _send_for_customer(
    request: Request,
    message: object,
    dispatcher: Dispatcher,
    scope: RequestScope,
) -> CustomerResponse | JSONResponse:
    """Dispatch a request whose success value is a single CustomerResult."""
    result = await dispatcher.send(message, scope)

    match result:
        case Success(value=dto):
            return CustomerResponse.from_dto(dto)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error, request, get_trace_id()
            )


async def get_customer(
    request: Request,
    customer_id: UUID,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    scope: RequestScope = Depends(get_request_scope),
) -> CustomerResponse | JSONResponse:
    """Get a customer by ID.

    GET /api/customers/{customer_id} → 200 OK

    Returns:
        CustomerResponse on success.
        JSONResponse 404 when the customer does not exist or is deleted.
    """
    return await _send_for_customer(
        request, GetCustomerById(customer_id=customer_id), dispatcher, scope
    )


async def create_customer(
    request: Request,
    response: Response,
    data: CustomerCreateRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    scope: RequestScope = Depends(get_request_scope),
) -> CustomerResponse | JSONResponse:
    """Create a customer.

    POST /api/customers → 201 Created with a Location header

    Args:
        request: FastAPI request object.
        response: Outgoing response (Location header is set on it).
        data: Customer creation payload.
        dispatcher: Request dispatcher (injected).
        scope: Per-request dependencies (injected).

    Returns:
        CustomerResponse on success (201 Created).
        JSONResponse with error on failure (400/409).
    """
    command = CreateCustomer(name=data.name, email=data.email, phone=data.phone)
    result = await dispatcher.send(command, scope)

    match result:
        case Success(value=dto):
            response.headers["Location"] = f"/api/customers/{dto.id}"
            return CustomerResponse.from_dto(dto)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error, request, get_trace_id()
            )


async def update_customer(
    request: Request,
    customer_id: UUID,
    data: CustomerUpdateRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    scope: RequestScope = Depends(get_request_scope),
) -> CustomerResponse | JSONResponse:
    """Replace a customer's name, email and phone.

    PUT /api/customers/{customer_id} → 200 OK
    """
    command = UpdateCustomer(
        customer_id=customer_id,
        name=data.name,
        email=data.email,
        phone=data.phone,
    )
    return await _send_for_customer(request, command, dispatcher, scope)


async def search_customers(
    request: Request,
    name: str | None = Query(None, description="Name contains (case-insensitive)"),
    email: str | None = Query(None, description="Email contains (case-insensitive)"),
    customer_type: CustomerType | None = Query(
        None, alias="type", description="Customer tier"
    ),
    customer_status: CustomerStatus | None = Query(
        None, alias="status", description="Lifecycle status"
    ),
    page_number: int = Query(1, alias="pageNumber", description="1-based page"),
    page_size: int | None = Query(None, alias="pageSize", description="Page size"),
    dispatcher: Dispatcher = Depends(get_dispatcher),
    scope: RequestScope = Depends(get_request_scope),
) -> CustomerPageResponse | JSONResponse:
    """Search customers with optional filters.

    GET /api/customers?name=&email=&type=&status=&pageNumber=&pageSize= → 200 OK

    Results are ordered by name. Page bounds are checked by the request
    pipeline so out-of-range values come back as 400 with field errors.
    """
    query = SearchCustomers(
        name=name,
        email=email,
        type=customer_type,
        status=customer_status,
        page_number=page_number,
        page_size=page_size if page_size is not None else settings.default_page_size,
    )
    result = await dispatcher.send(query, scope)

    match result:
        case Success(value=page):
            return CustomerPageResponse.from_dto(page)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error, request, get_trace_id()
            )


async def list_vip_customers(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    scope: RequestScope = Depends(get_request_scope),
) -> list[CustomerResponse] | JSONResponse:
    """List every non-deleted VIP customer.

    GET /api/customers/vip → 200 OK
    """
    result = await dispatcher.send(ListVipCustomers(), scope)

    match result:
        case Success(value=customers):
            return [CustomerResponse.from_dto(dto) for dto in customers]
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error, request, get_trace_id()
            )


async def promote_customer(
    request: Request,
    customer_id: UUID,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    scope: RequestScope = Depends(get_request_scope),
) -> CustomerResponse | JSONResponse:
    """POST /api/customers/{customer_id}/promote → 200 OK (409 if already VIP)."""
    return await _send_for_customer(
        request, PromoteCustomerToVip(customer_id=customer_id), dispatcher, scope
    )


async def suspend_customer(
    request: Request,
    customer_id: UUID,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    scope: RequestScope = Depends(get_request_scope),
) -> CustomerResponse | JSONResponse:
    """POST /api/customers/{customer_id}/suspend → 200 OK (409 if suspended)."""
    return await _send_for_customer(
        request, SuspendCustomer(customer_id=customer_id), dispatcher, scope
    )


async def activate_customer(
    request: Request,
    customer_id: UUID,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    scope: RequestScope = Depends(get_request_scope),
) -> CustomerResponse | JSONResponse:
    """POST /api/customers/{customer_id}/activate → 200 OK (409 if already active)."""
    return await _send_for_customer(
        request, ActivateCustomer(customer_id=customer_id), dispatcher, scope
    )


async def delete_customer(
    request: Request,
    customer_id: UUID,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    scope: RequestScope = Depends(get_request_scope),
) -> Response:
    """Soft-delete a customer.

    DELETE /api/customers/{customer_id} → 204 No Content
    """
    result = await dispatcher.send(DeleteCustomer(customer_id=customer_id), scope)

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error, request, get_trace_id()
            )
