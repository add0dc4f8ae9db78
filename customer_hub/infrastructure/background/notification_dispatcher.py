"""Fire-and-forget background work.

Work scheduled here outlives the request that scheduled it: the task is
shielded from the caller's cancellation and a strong reference is held
until it finishes (the event loop only keeps weak references to tasks).
Failures are logged as background_task_failed and dropped.
"""

import asyncio

from customer_hub.domain.protocols import CoroutineFactory, LoggerProtocol


class NotificationDispatcher:
    """Runs notification coroutines as detached asyncio tasks.

    Example:
        >>> dispatcher = NotificationDispatcher(logger=get_logger())
        >>> dispatcher.schedule(
        ...     lambda: email_service.send_welcome_email(email, name),
        ...     name="welcome_email",
        ... )
        >>> await dispatcher.drain()  # at shutdown
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """Number of tasks still running."""
        return len(self._tasks)

    def schedule(self, factory: CoroutineFactory, *, name: str) -> None:
        """Start work in the background.

        Must be called from a running event loop.

        Args:
            factory: Callable returning the coroutine to run.
            name: Task name used in logs.
        """
        task = asyncio.create_task(self._run(factory, name), name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, factory: CoroutineFactory, name: str) -> None:
        try:
            # Inner task keeps running even if this wrapper gets cancelled
            await asyncio.shield(factory())
        except asyncio.CancelledError:
            self._logger.warning("background_task_cancelled", task_name=name)
            raise
        except Exception as e:
            self._logger.error("background_task_failed", error=e, task_name=name)

    async def drain(self) -> None:
        """Wait for all in-flight work to finish."""
        while self._tasks:
            await asyncio.gather(*tuple(self._tasks), return_exceptions=True)
