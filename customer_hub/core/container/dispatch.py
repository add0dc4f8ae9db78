"""Request dispatcher factories.

- get_handler_registry(): explicit request -> handler table built from the
  CQRS registry and verified for completeness (app-scoped)
- get_dispatcher(): dispatcher with behaviors in order
  logging -> performance -> validation (app-scoped)
- get_request_scope(): per-request dependencies for handler factories
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from customer_hub.application.cqrs import Dispatcher, HandlerRegistry, RequestScope
from customer_hub.application.cqrs.behaviors import (
    LoggingBehavior,
    PerformanceBehavior,
    ValidationBehavior,
)
from customer_hub.application.cqrs.registry import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
    get_all_commands,
    get_all_queries,
)
from customer_hub.application.validation.customer_validators import (
    build_customer_validators,
)
from customer_hub.core.config import get_settings
from customer_hub.core.container.events import get_event_bus
from customer_hub.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_notification_dispatcher,
)
from customer_hub.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from customer_hub.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)


@lru_cache()
def get_handler_registry() -> HandlerRegistry:
    """Build and verify the handler registry (app-scoped).

    Raises:
        HandlerRegistrationError: Duplicate or missing registrations.
    """
    registry = HandlerRegistry.from_metadata(COMMAND_REGISTRY, QUERY_REGISTRY)
    registry.ensure_complete([*get_all_commands(), *get_all_queries()])
    return registry


@lru_cache()
def get_dispatcher() -> Dispatcher:
    """Get the request dispatcher singleton (app-scoped)."""
    settings = get_settings()
    return Dispatcher(
        get_handler_registry(),
        behaviors=[
            LoggingBehavior(),
            PerformanceBehavior(threshold_ms=settings.slow_request_threshold_ms),
            ValidationBehavior(build_customer_validators(settings.max_page_size)),
        ],
    )


async def get_request_scope(
    session: AsyncSession = Depends(get_db_session),
) -> RequestScope:
    """Build the per-request scope (request-scoped FastAPI dependency)."""
    return RequestScope(
        uow=SqlAlchemyUnitOfWork(session),
        logger=get_logger(),
        event_bus=get_event_bus(),
        background=get_notification_dispatcher(),
        correlation_id=get_trace_id(),
    )
