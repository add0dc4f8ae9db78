"""System router for non-versioned application endpoints.

Provides root and health endpoints outside the customer API contract.
Both are side-effect free and suitable for load balancer probes.
"""

from fastapi import APIRouter, Depends

from customer_hub.core.config import settings
from customer_hub.core.container import get_database
from customer_hub.infrastructure.persistence import Database


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Service name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health(database: Database = Depends(get_database)) -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    The service itself reports healthy whenever it can answer; database
    reachability is reported alongside so probes can tell the two apart.

    Returns:
        dict[str, str]: ``{"status": "healthy", "database": "ok" | "unavailable"}``
    """
    database_ok = await database.check_connection()
    return {
        "status": "healthy",
        "database": "ok" if database_ok else "unavailable",
    }
