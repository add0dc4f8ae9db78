"""Declarative request validators.

A RequestValidator declares, once, the rules for one request type:

    class CreateCustomerValidator(RequestValidator[CreateCustomer]):
        resource_type = "Customer"

        def __init__(self) -> None:
            super().__init__()
            self.rule_for("name", NotEmpty(), MaxLength(100))
            self.rule_async(
                email_is_unique,
                field="email",
                message="Email already registered",
                code=ErrorCode.EMAIL_ALREADY_EXISTS,
            )

Field rule chains stop at the first failing rule of that field, so an empty
name reports "required" only. Violations keep declaration order.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

from customer_hub.application.validation.rules import FieldRule
from customer_hub.core.enums import ErrorCode
from customer_hub.core.errors import ValidationError

if TYPE_CHECKING:
    from customer_hub.application.cqrs.scope import RequestScope


@dataclass(frozen=True)
class _FieldChain:
    field: str
    rules: tuple[FieldRule, ...]


@dataclass(frozen=True)
class _CrossFieldRule[T]:
    predicate: Callable[[T], bool]
    field: str | None
    message: str
    code: ErrorCode


@dataclass(frozen=True)
class _AsyncRule[T]:
    check: Callable[[T, "RequestScope"], Awaitable[bool]]
    field: str | None
    message: str
    code: ErrorCode


class RequestValidator[T]:
    """Rules for one request type.

    Attributes:
        resource_type: Resource name reported on conflicts from async rules.
    """

    resource_type: str = "Resource"

    def __init__(self) -> None:
        self._chains: list[_FieldChain] = []
        self._cross_field: list[_CrossFieldRule[T]] = []
        self._async_rules: list[_AsyncRule[T]] = []

    def rule_for(self, field: str, *rules: FieldRule) -> Self:
        """Declare a rule chain for one request attribute."""
        self._chains.append(_FieldChain(field=field, rules=rules))
        return self

    def rule(
        self,
        predicate: Callable[[T], bool],
        field: str | None,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_FAILED,
    ) -> Self:
        """Declare a rule over the whole request (cross-field)."""
        self._cross_field.append(
            _CrossFieldRule(
                predicate=predicate, field=field, message=message, code=code
            )
        )
        return self

    def rule_async(
        self,
        check: Callable[[T, "RequestScope"], Awaitable[bool]],
        field: str | None,
        message: str,
        code: ErrorCode,
    ) -> Self:
        """Declare an async rule (e.g. a uniqueness lookup).

        Args:
            check: Returns True when the request is acceptable.
            field: Field reported on violation.
            message: Message reported on violation.
            code: Error code reported on violation.
        """
        self._async_rules.append(
            _AsyncRule(check=check, field=field, message=message, code=code)
        )
        return self

    def validate(self, request: T) -> list[ValidationError]:
        """Run synchronous rules; return violations in declaration order."""
        errors: list[ValidationError] = []
        for chain in self._chains:
            value: Any = getattr(request, chain.field)
            for field_rule in chain.rules:
                error = field_rule.validate(chain.field, value)
                if error is not None:
                    errors.append(error)
                    break

        for cross in self._cross_field:
            if not cross.predicate(request):
                errors.append(
                    ValidationError(
                        code=cross.code, message=cross.message, field=cross.field
                    )
                )
        return errors

    async def validate_async(
        self, request: T, scope: "RequestScope"
    ) -> list[ValidationError]:
        """Run async rules sequentially; return violations."""
        errors: list[ValidationError] = []
        for async_rule in self._async_rules:
            if not await async_rule.check(request, scope):
                errors.append(
                    ValidationError(
                        code=async_rule.code,
                        message=async_rule.message,
                        field=async_rule.field,
                    )
                )
        return errors
