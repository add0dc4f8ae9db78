"""Main FastAPI application entry point.

Wires the composition root into an ASGI app:
- Startup: verify the handler registry, optionally create the schema
- Shutdown: drain background notifications, dispose the engine

Run with:
    uvicorn customer_hub.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from customer_hub.core.config import settings
from customer_hub.core.container import (
    get_database,
    get_handler_registry,
    get_logger,
    get_notification_dispatcher,
)
from customer_hub.presentation.routers.api.errors import register_exception_handlers
from customer_hub.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from customer_hub.presentation.routers.api.router import api_router
from customer_hub.presentation.routers.system import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    A missing or duplicate handler registration fails startup instead of
    surfacing on the first request that needs it.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()

    registry = get_handler_registry()
    logger.info("handler_registry_verified", handler_count=len(registry))

    if settings.db_create_schema:
        await get_database().create_all()
        logger.info("database_schema_created")

    yield

    notifications = get_notification_dispatcher()
    pending = notifications.pending
    await notifications.drain()
    await get_database().close()
    logger.info("application_shutdown", drained_notifications=pending)


app = FastAPI(
    title=settings.app_name,
    description="Customer management service",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(api_router)
