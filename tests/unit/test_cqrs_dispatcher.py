"""Unit tests for the Dispatcher and HandlerRegistry.

Dispatch order, short-circuiting behaviors, lazy handler construction and
registry configuration errors. Handlers and behaviors are in-test doubles.
"""

from dataclasses import dataclass
from unittest.mock import ANY, AsyncMock, MagicMock

import pytest

from customer_hub.application.cqrs import (
    Dispatcher,
    HandlerNotFoundError,
    HandlerRegistrationError,
    HandlerRegistry,
    RequestScope,
)
from customer_hub.core.enums import ErrorCode
from customer_hub.core.errors import ValidationFailedError
from customer_hub.core.result import Failure, Success


@dataclass(frozen=True, kw_only=True)
class Ping:
    text: str = "ping"


@dataclass(frozen=True, kw_only=True)
class Unregistered:
    pass


class EchoHandler:
    def __init__(self, calls: list[str]) -> None:
        self._calls = calls

    async def handle(self, request: Ping):
        self._calls.append("handler")
        return Success(value=request.text.upper())


class RecordingBehavior:
    def __init__(self, name: str, calls: list[str]) -> None:
        self.name = name
        self._calls = calls
        self.contexts = []

    async def handle(self, request, context, next_stage):
        self.contexts.append(context)
        self._calls.append(f"{self.name}:before")
        result = await next_stage()
        self._calls.append(f"{self.name}:after")
        return result


class RejectingBehavior:
    async def handle(self, request, context, next_stage):
        return Failure(error=ValidationFailedError())


def _scope(mock_logger, correlation_id=None) -> RequestScope:
    return RequestScope(
        uow=MagicMock(),
        logger=mock_logger,
        event_bus=MagicMock(),
        background=MagicMock(),
        correlation_id=correlation_id,
    )


@pytest.mark.unit
class TestDispatcher:
    async def test_send_returns_handler_result(self, mock_logger):
        # Arrange
        calls: list[str] = []
        registry = HandlerRegistry()
        registry.register(Ping, lambda scope: EchoHandler(calls))
        dispatcher = Dispatcher(registry)

        # Act
        result = await dispatcher.send(Ping(text="hi"), _scope(mock_logger))

        # Assert
        assert result == Success(value="HI")
        assert calls == ["handler"]

    async def test_behaviors_wrap_handler_in_registration_order(self, mock_logger):
        # Arrange
        calls: list[str] = []
        registry = HandlerRegistry()
        registry.register(Ping, lambda scope: EchoHandler(calls))
        dispatcher = Dispatcher(
            registry,
            behaviors=[
                RecordingBehavior("outer", calls),
                RecordingBehavior("middle", calls),
                RecordingBehavior("inner", calls),
            ],
        )

        # Act
        await dispatcher.send(Ping(), _scope(mock_logger))

        # Assert
        assert calls == [
            "outer:before",
            "middle:before",
            "inner:before",
            "handler",
            "inner:after",
            "middle:after",
            "outer:after",
        ]

    async def test_short_circuit_skips_handler_construction(self, mock_logger):
        # Arrange
        factory = MagicMock()
        registry = HandlerRegistry()
        registry.register(Ping, factory)
        calls: list[str] = []
        outer = RecordingBehavior("outer", calls)
        dispatcher = Dispatcher(registry, behaviors=[outer, RejectingBehavior()])

        # Act
        result = await dispatcher.send(Ping(), _scope(mock_logger))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        factory.assert_not_called()
        assert calls == ["outer:before", "outer:after"]

    async def test_handler_factory_receives_scope_with_bound_logger(
        self, mock_logger
    ):
        # Arrange
        bound = MagicMock(name="bound_logger")
        mock_logger.bind.return_value = bound
        received = []

        def factory(scope):
            received.append(scope)
            return EchoHandler([])

        registry = HandlerRegistry()
        registry.register(Ping, factory)
        scope = _scope(mock_logger)

        # Act
        await Dispatcher(registry).send(Ping(), scope)

        # Assert
        assert len(received) == 1
        assert received[0].uow is scope.uow
        assert received[0].event_bus is scope.event_bus
        assert received[0].logger is bound
        mock_logger.bind.assert_called_once_with(
            request_name="Ping", correlation_id=ANY
        )

    async def test_unregistered_request_raises(self, mock_logger):
        dispatcher = Dispatcher(HandlerRegistry())

        with pytest.raises(HandlerNotFoundError, match="Unregistered"):
            await dispatcher.send(Unregistered(), _scope(mock_logger))

    async def test_context_carries_scope_correlation_id(self, mock_logger):
        # Arrange
        registry = HandlerRegistry()
        registry.register(Ping, lambda scope: EchoHandler([]))
        behavior = RecordingBehavior("only", [])
        dispatcher = Dispatcher(registry, behaviors=[behavior])

        # Act
        await dispatcher.send(Ping(), _scope(mock_logger, correlation_id="trace-123"))

        # Assert
        context = behavior.contexts[0]
        assert context.correlation_id == "trace-123"
        assert context.request_name == "Ping"
        mock_logger.bind.assert_called_once_with(
            request_name="Ping", correlation_id="trace-123"
        )

    async def test_context_generates_correlation_id_when_absent(self, mock_logger):
        # Arrange
        registry = HandlerRegistry()
        registry.register(Ping, lambda scope: EchoHandler([]))
        behavior = RecordingBehavior("only", [])
        dispatcher = Dispatcher(registry, behaviors=[behavior])

        # Act
        await dispatcher.send(Ping(), _scope(mock_logger))
        await dispatcher.send(Ping(), _scope(mock_logger))

        # Assert
        first, second = (c.correlation_id for c in behavior.contexts)
        assert first
        assert first != second


@pytest.mark.unit
class TestHandlerRegistry:
    def test_duplicate_registration_rejected(self):
        registry = HandlerRegistry()
        registry.register(Ping, lambda scope: EchoHandler([]))

        with pytest.raises(HandlerRegistrationError, match="already registered"):
            registry.register(Ping, lambda scope: EchoHandler([]))

    def test_ensure_complete_lists_missing_types(self):
        registry = HandlerRegistry()
        registry.register(Ping, lambda scope: EchoHandler([]))

        with pytest.raises(HandlerRegistrationError, match="Unregistered"):
            registry.ensure_complete([Ping, Unregistered])

    def test_ensure_complete_passes_when_all_registered(self):
        registry = HandlerRegistry()
        registry.register(Ping, lambda scope: EchoHandler([]))

        registry.ensure_complete([Ping])

        assert Ping in registry
        assert Unregistered not in registry
        assert len(registry) == 1

    def test_resolve_unknown_type(self):
        with pytest.raises(HandlerNotFoundError) as exc_info:
            HandlerRegistry().resolve(Ping)

        assert exc_info.value.request_type is Ping


@pytest.mark.unit
class TestDispatcherWithValidation:
    async def test_invalid_create_never_reaches_repository(self, mock_logger):
        # Arrange
        from customer_hub.application.commands import CreateCustomer
        from customer_hub.application.cqrs.behaviors import ValidationBehavior
        from customer_hub.application.validation.customer_validators import (
            build_customer_validators,
        )
        from customer_hub.core.container import get_handler_registry

        uow = MagicMock()
        uow.customers = AsyncMock()
        uow.commit = AsyncMock()
        scope = RequestScope(
            uow=uow,
            logger=mock_logger,
            event_bus=AsyncMock(),
            background=MagicMock(),
        )
        dispatcher = Dispatcher(
            get_handler_registry(),
            behaviors=[ValidationBehavior(build_customer_validators(100))],
        )

        # Act
        result = await dispatcher.send(
            CreateCustomer(name="John Doe", email="not-an-email", phone="+1234567890"),
            scope,
        )

        # Assert
        assert isinstance(result, Failure)
        assert len(result.error.errors) >= 1
        assert uow.customers.add.await_count == 0
        uow.commit.assert_not_awaited()
