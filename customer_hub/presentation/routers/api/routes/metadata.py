"""Route metadata types for the API Route Registry.

The registry is the single source of truth for the customer API. Each entry
declares method, path, endpoint function, response model, success status and
the error responses advertised in OpenAPI.

Core types:
    RouteMetadata: Complete route definition
    HTTPMethod: HTTP method enum (GET, POST, PUT, DELETE)
    ErrorSpec: Error response definition for OpenAPI
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods used by the customer API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response definition for OpenAPI.

    Attributes:
        status: HTTP status code (e.g., 400, 404)
        description: Human-readable error description
        model: Optional Pydantic model for response (defaults to ProblemDetails)

    Examples:
        >>> ErrorSpec(status=404, description="Customer not found")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Declarative specification of one API route.

    Identity fields:
        method: HTTP method
        path: URL path relative to the API prefix (e.g., "/customers/{customer_id}")
        handler: Async endpoint function

    Documentation:
        resource: Resource category (e.g., "customers")
        tags: OpenAPI tags
        summary: Short endpoint description
        description: Detailed endpoint description
        operation_id: Stable operation ID for client generation

    Request/Response:
        response_model: Pydantic model for the success response (None for 204)
        status_code: Expected success status
        errors: Possible error responses for OpenAPI

    Examples:
        >>> RouteMetadata(
        ...     method=HTTPMethod.GET,
        ...     path="/customers/{customer_id}",
        ...     handler=get_customer,
        ...     resource="customers",
        ...     tags=["Customers"],
        ...     summary="Get customer",
        ...     response_model=CustomerResponse,
        ... )
    """

    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    resource: str
    tags: Sequence[str]

    summary: str
    description: str | None = None
    operation_id: str | None = None

    response_model: Any = None
    status_code: int = 200
    errors: Sequence[ErrorSpec] = field(default_factory=tuple)
