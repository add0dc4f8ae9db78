"""Request dispatcher (mediator).

Dispatch flow for one request:

    LoggingBehavior -> PerformanceBehavior -> ValidationBehavior -> handler

Behaviors are composed onion-style in registration order: the first one
registered is outermost. Any behavior may short-circuit by returning a
Failure without calling the next stage. The handler is only constructed
when the innermost stage actually runs.

Usage:
    dispatcher = Dispatcher(registry, behaviors=[LoggingBehavior(), ...])
    result = await dispatcher.send(CreateCustomer(...), scope)
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import replace
from functools import partial
from typing import Any, Protocol

from uuid_extensions import uuid7

from customer_hub.application.cqrs.handler_registry import HandlerRegistry
from customer_hub.application.cqrs.scope import DispatchContext, RequestScope
from customer_hub.core.result import Result

type NextStage = Callable[[], Awaitable[Result[Any, Any]]]


class PipelineBehavior(Protocol):
    """Cross-cutting wrapper around handler invocation."""

    async def handle(
        self, request: Any, context: DispatchContext, next_stage: NextStage
    ) -> Result[Any, Any]:
        """Run around the next stage.

        Args:
            request: The dispatched request.
            context: Dispatch context (name, correlation id, scope, logger).
            next_stage: Invokes the remaining pipeline.

        Returns:
            The next stage's Result, or a short-circuit Failure.
        """
        ...


class Dispatcher:
    """Routes each request to its single handler through the behavior chain."""

    def __init__(
        self,
        registry: HandlerRegistry,
        behaviors: Sequence[PipelineBehavior] = (),
    ) -> None:
        self._registry = registry
        self._behaviors = tuple(behaviors)

    @property
    def behaviors(self) -> tuple[PipelineBehavior, ...]:
        return self._behaviors

    async def send(self, request: Any, scope: RequestScope) -> Result[Any, Any]:
        """Dispatch a request and return its Result.

        Args:
            request: Command or query instance.
            scope: Per-request dependencies.

        Returns:
            Success or Failure from the handler or a short-circuiting behavior.

        Raises:
            HandlerNotFoundError: If the request type has no handler.
        """
        factory = self._registry.resolve(type(request))

        request_name = type(request).__name__
        correlation_id = scope.correlation_id or str(uuid7())
        context = DispatchContext(
            request_name=request_name,
            correlation_id=correlation_id,
            scope=scope,
            logger=scope.logger.bind(
                request_name=request_name,
                correlation_id=correlation_id,
            ),
        )

        # Handlers log with the same request context as the behaviors
        handler_scope = replace(scope, logger=context.logger)

        async def invoke_handler() -> Result[Any, Any]:
            handler = factory(handler_scope)
            return await handler.handle(request)

        pipeline: NextStage = invoke_handler
        for behavior in reversed(self._behaviors):
            pipeline = partial(behavior.handle, request, context, pipeline)

        return await pipeline()
