"""Customer API router.

All routes are generated from the Route Metadata Registry at import time.
See routes/registry.py for the catalog:

    /api/customers                  - Customer search and creation
    /api/customers/vip              - VIP listing
    /api/customers/{id}             - Read, update, delete
    /api/customers/{id}/promote     - Promote to VIP
    /api/customers/{id}/suspend     - Suspend
    /api/customers/{id}/activate    - Reactivate
"""

from fastapi import APIRouter

from customer_hub.presentation.routers.api.routes.generator import (
    register_routes_from_registry,
)
from customer_hub.presentation.routers.api.routes.registry import ROUTE_REGISTRY

api_router = APIRouter(prefix="/api")
register_routes_from_registry(api_router, ROUTE_REGISTRY)

__all__ = ["api_router"]
