"""Route generator for the API Route Registry.

Converts RouteMetadata entries into FastAPI routes at application startup.

Usage:
    from customer_hub.presentation.routers.api.routes.registry import ROUTE_REGISTRY
    from customer_hub.presentation.routers.api.routes.generator import (
        register_routes_from_registry,
    )

    api_router = APIRouter(prefix="/api")
    register_routes_from_registry(api_router, ROUTE_REGISTRY)
"""

from collections.abc import Sequence
from typing import Any

from fastapi import APIRouter

from customer_hub.presentation.routers.api.errors.problem_details import (
    ProblemDetails,
)
from customer_hub.presentation.routers.api.routes.metadata import (
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: Sequence[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Routes are added in registry order, so literal paths such as
    ``/customers/vip`` must precede parameterized siblings.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: RouteMetadata entries to convert into routes
    """
    for metadata in registry:
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
        )


def _build_responses(errors: Sequence[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error definitions.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Customer not found")])
        {404: {"description": "Customer not found", "model": ProblemDetails}}
    """
    return {
        error.status: {
            "description": error.description,
            "model": error.model or ProblemDetails,
        }
        for error in errors
    }
