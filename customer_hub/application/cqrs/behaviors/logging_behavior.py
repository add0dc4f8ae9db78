"""Structured logging around every dispatched request."""

import time
from typing import Any

from customer_hub.application.cqrs.dispatcher import NextStage
from customer_hub.application.cqrs.scope import DispatchContext
from customer_hub.core.result import Failure, Result


class LoggingBehavior:
    """Logs start, completion and unexpected exceptions of a request.

    Events:
        request_started: Before the next stage runs.
        request_completed: With outcome=success|failure (and error_code on
            failure) plus elapsed_ms.
        request_failed_with_exception: The exception is logged with full
            detail and re-raised unchanged.
    """

    async def handle(
        self, request: Any, context: DispatchContext, next_stage: NextStage
    ) -> Result[Any, Any]:
        logger = context.logger
        logger.info("request_started")
        started = time.perf_counter()

        try:
            result = await next_stage()
        except Exception as e:
            logger.error(
                "request_failed_with_exception",
                error=e,
                elapsed_ms=_elapsed_ms(started),
            )
            raise

        if isinstance(result, Failure):
            code = getattr(result.error, "code", None)
            logger.info(
                "request_completed",
                outcome="failure",
                error_code=getattr(code, "value", str(code)),
                error_message=getattr(result.error, "message", str(result.error)),
                elapsed_ms=_elapsed_ms(started),
            )
        else:
            logger.info(
                "request_completed",
                outcome="success",
                elapsed_ms=_elapsed_ms(started),
            )
        return result


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
