"""CQRS dispatch: registry tables, handler registry, dispatcher, behaviors."""

from customer_hub.application.cqrs.dispatcher import (
    Dispatcher,
    NextStage,
    PipelineBehavior,
)
from customer_hub.application.cqrs.exceptions import (
    HandlerNotFoundError,
    HandlerRegistrationError,
)
from customer_hub.application.cqrs.handler_registry import HandlerRegistry
from customer_hub.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    HandlerFactory,
    QueryMetadata,
    RequestHandler,
)
from customer_hub.application.cqrs.scope import DispatchContext, RequestScope

__all__ = [
    "CQRSCategory",
    "CommandMetadata",
    "DispatchContext",
    "Dispatcher",
    "HandlerFactory",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "HandlerRegistry",
    "NextStage",
    "PipelineBehavior",
    "QueryMetadata",
    "RequestHandler",
    "RequestScope",
]
