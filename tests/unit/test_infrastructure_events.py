"""Unit tests for the in-memory event bus.

Verifies:
- All subscribers for an event type are called
- Exact type matching (no inheritance dispatch)
- Fail-open: one failing subscriber neither stops others nor the publisher
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from customer_hub.domain.events import CustomerCreated, CustomerDeleted
from customer_hub.infrastructure.events.in_memory_event_bus import InMemoryEventBus


def _created_event() -> CustomerCreated:
    return CustomerCreated(customer_id=uuid7(), name="Ada", email="ada@example.com")


@pytest.mark.unit
class TestInMemoryEventBus:
    async def test_publish_calls_every_subscriber(self, mock_logger):
        # Arrange
        bus = InMemoryEventBus(logger=mock_logger)
        first = AsyncMock()
        second = AsyncMock()
        bus.subscribe(CustomerCreated, first)
        bus.subscribe(CustomerCreated, second)
        event = _created_event()

        # Act
        await bus.publish(event)

        # Assert
        first.assert_awaited_once_with(event)
        second.assert_awaited_once_with(event)
        assert bus.handler_count(CustomerCreated) == 2

    async def test_publish_without_subscribers_is_noop(self, mock_logger):
        bus = InMemoryEventBus(logger=mock_logger)

        await bus.publish(_created_event())

        mock_logger.debug.assert_not_called()
        mock_logger.warning.assert_not_called()

    async def test_only_exact_event_type_is_dispatched(self, mock_logger):
        bus = InMemoryEventBus(logger=mock_logger)
        handler = AsyncMock()
        bus.subscribe(CustomerDeleted, handler)

        await bus.publish(_created_event())

        handler.assert_not_awaited()

    async def test_failing_subscriber_is_logged_and_others_still_run(
        self, mock_logger
    ):
        # Arrange
        bus = InMemoryEventBus(logger=mock_logger)

        async def broken(event):
            raise RuntimeError("smtp down")

        healthy = AsyncMock()
        bus.subscribe(CustomerCreated, broken)
        bus.subscribe(CustomerCreated, healthy)

        # Act
        await bus.publish(_created_event())

        # Assert
        healthy.assert_awaited_once()
        mock_logger.warning.assert_called_once()
        call = mock_logger.warning.call_args
        assert call.args[0] == "event_handler_failed"
        assert call.kwargs["handler_name"] == "broken"
        assert call.kwargs["error_type"] == "RuntimeError"
        assert call.kwargs["error_message"] == "smtp down"
