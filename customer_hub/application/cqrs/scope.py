"""Per-request dependency scope for handler construction.

A RequestScope is built once per dispatched request (usually per HTTP
request) and discarded afterwards. Handler factories pull everything they
need from it, so handlers never outlive the request that created them.
"""

from dataclasses import dataclass

from customer_hub.domain.protocols import (
    BackgroundTaskProtocol,
    EventBusProtocol,
    LoggerProtocol,
    UnitOfWork,
)


@dataclass(frozen=True, kw_only=True)
class RequestScope:
    """Dependencies available to one request.

    Attributes:
        uow: Unit of work bound to the request's database session.
        logger: Logger. Handlers receive it bound with request_name and
            correlation_id.
        event_bus: App-scoped domain event bus.
        background: App-scoped fire-and-forget task runner.
        correlation_id: Trace id of the originating HTTP request, if any.
    """

    uow: UnitOfWork
    logger: LoggerProtocol
    event_bus: EventBusProtocol
    background: BackgroundTaskProtocol
    correlation_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class DispatchContext:
    """Context shared by the behaviors wrapping one dispatch.

    Attributes:
        request_name: Class name of the dispatched request.
        correlation_id: Trace id or a freshly generated id.
        scope: The request scope.
        logger: Scope logger bound with request_name and correlation_id.
    """

    request_name: str
    correlation_id: str
    scope: RequestScope
    logger: LoggerProtocol
