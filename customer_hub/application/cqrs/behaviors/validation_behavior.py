"""Declarative request validation before handler execution.

Two phases per request:

1. Synchronous rules of every validator registered for the request type.
   Any violation short-circuits with Failure(ValidationFailedError) holding
   all violations in declaration order.
2. Only when phase 1 passes: asynchronous rules (lookups such as email
   uniqueness). The first violation short-circuits with
   Failure(ConflictError).

Request types without validators pass straight through.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from customer_hub.application.cqrs.dispatcher import NextStage
from customer_hub.application.cqrs.scope import DispatchContext
from customer_hub.application.validation import RequestValidator
from customer_hub.core.errors import (
    ConflictError,
    ValidationError,
    ValidationFailedError,
)
from customer_hub.core.result import Failure, Result


class ValidationBehavior:
    """Runs registered validators and short-circuits on violations.

    Args:
        validators: Validators keyed by concrete request type.
    """

    def __init__(
        self, validators: Mapping[type, Sequence[RequestValidator[Any]]]
    ) -> None:
        self._validators = validators

    async def handle(
        self, request: Any, context: DispatchContext, next_stage: NextStage
    ) -> Result[Any, Any]:
        validators = self._validators.get(type(request), ())
        if not validators:
            return await next_stage()

        errors: list[ValidationError] = []
        for validator in validators:
            errors.extend(validator.validate(request))

        if errors:
            context.logger.warning(
                "request_validation_failed",
                fields=[e.field for e in errors],
                error_count=len(errors),
            )
            return Failure(error=ValidationFailedError(errors=tuple(errors)))

        for validator in validators:
            conflicts = await validator.validate_async(request, context.scope)
            if conflicts:
                first = conflicts[0]
                context.logger.warning(
                    "request_conflict_detected",
                    field=first.field,
                    error_code=first.code.value,
                )
                return Failure(
                    error=ConflictError(
                        code=first.code,
                        message=first.message,
                        resource_type=validator.resource_type,
                        conflicting_field=first.field,
                    )
                )

        return await next_stage()
