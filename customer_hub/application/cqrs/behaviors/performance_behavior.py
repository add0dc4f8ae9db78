"""Slow request detection."""

import time
from typing import Any

from customer_hub.application.cqrs.dispatcher import NextStage
from customer_hub.application.cqrs.scope import DispatchContext
from customer_hub.core.result import Result


class PerformanceBehavior:
    """Warns when a request takes longer than a threshold.

    Never alters the Result; the warning is the only side effect.

    Args:
        threshold_ms: Elapsed time (milliseconds) above which a
            long_running_request warning is logged.
    """

    def __init__(self, threshold_ms: int) -> None:
        self._threshold_ms = threshold_ms

    async def handle(
        self, request: Any, context: DispatchContext, next_stage: NextStage
    ) -> Result[Any, Any]:
        started = time.perf_counter()
        try:
            return await next_stage()
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            if elapsed_ms > self._threshold_ms:
                context.logger.warning(
                    "long_running_request",
                    elapsed_ms=round(elapsed_ms, 2),
                    threshold_ms=self._threshold_ms,
                )
