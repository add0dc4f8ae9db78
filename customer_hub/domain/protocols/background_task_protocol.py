"""Background task protocol (port) for fire-and-forget work."""

from collections.abc import Callable, Coroutine
from typing import Any, Protocol

# Zero-argument factory so the coroutine is only created when scheduled
CoroutineFactory = Callable[[], Coroutine[Any, Any, None]]


class BackgroundTaskProtocol(Protocol):
    """Runs work detached from the caller's lifetime.

    Scheduled work is not cancelled when the originating request finishes
    or is cancelled. Failures are logged and dropped; they never reach the
    caller.
    """

    def schedule(self, factory: CoroutineFactory, *, name: str) -> None:
        """Start work in the background.

        Args:
            factory: Callable returning the coroutine to run.
            name: Task name used in logs.
        """
        ...

    async def drain(self) -> None:
        """Wait for all in-flight work (used at shutdown and in tests)."""
        ...
