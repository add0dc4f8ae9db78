"""Built-in field rules for request validators.

Each rule answers one question about one value and produces a
ValidationError when the answer is no. Rules other than NotEmpty treat a
missing value (None) as valid, so optional fields only get checked when
present.

Usage:
    validator.rule_for("name", NotEmpty(), MaxLength(100))
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from customer_hub.core.enums import ErrorCode
from customer_hub.core.errors import ValidationError
from customer_hub.domain.validators import validate_phone_number
from customer_hub.domain.value_objects import Email


class FieldRule:
    """Base class for single-value rules.

    Subclasses implement is_valid() and describe(); validate() builds the
    ValidationError. A `message` passed to the constructor overrides the
    default description.
    """

    code: ErrorCode = ErrorCode.INVALID_VALUE
    message: str | None = None

    def is_valid(self, value: Any) -> bool:
        raise NotImplementedError

    def describe(self, field_name: str) -> str:
        raise NotImplementedError

    def validate(self, field_name: str, value: Any) -> ValidationError | None:
        if self.is_valid(value):
            return None
        return ValidationError(
            code=self.code,
            message=self.message or self.describe(field_name),
            field=field_name,
        )


def _label(field_name: str) -> str:
    return field_name.replace("_", " ").capitalize()


@dataclass(frozen=True)
class NotEmpty(FieldRule):
    """Value is present and not blank."""

    message: str | None = None
    code: ErrorCode = ErrorCode.REQUIRED_FIELD_MISSING

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return True

    def describe(self, field_name: str) -> str:
        return f"{_label(field_name)} is required"


@dataclass(frozen=True)
class MaxLength(FieldRule):
    max_length: int
    message: str | None = None
    code: ErrorCode = ErrorCode.INVALID_LENGTH

    def is_valid(self, value: Any) -> bool:
        return value is None or len(value) <= self.max_length

    def describe(self, field_name: str) -> str:
        return f"{_label(field_name)} cannot exceed {self.max_length} characters"


@dataclass(frozen=True)
class MinLength(FieldRule):
    min_length: int
    message: str | None = None
    code: ErrorCode = ErrorCode.INVALID_LENGTH

    def is_valid(self, value: Any) -> bool:
        return value is None or len(value) >= self.min_length

    def describe(self, field_name: str) -> str:
        return f"{_label(field_name)} must be at least {self.min_length} characters"


@dataclass(frozen=True)
class Matches(FieldRule):
    """Value matches a regular expression (re.match semantics)."""

    pattern: re.Pattern[str]
    message: str | None = None
    code: ErrorCode = ErrorCode.INVALID_FORMAT

    def is_valid(self, value: Any) -> bool:
        return value is None or self.pattern.match(value) is not None

    def describe(self, field_name: str) -> str:
        return f"{_label(field_name)} has an invalid format"


@dataclass(frozen=True)
class ValidEmail(FieldRule):
    """Value is a syntactically valid email address (email-validator)."""

    message: str | None = None
    code: ErrorCode = ErrorCode.INVALID_EMAIL

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        try:
            Email(value)
        except ValueError:
            return False
        return True

    def describe(self, field_name: str) -> str:
        return "A valid email address is required"


@dataclass(frozen=True)
class ValidPhone(FieldRule):
    message: str | None = None
    code: ErrorCode = ErrorCode.INVALID_PHONE_NUMBER

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        try:
            validate_phone_number(value)
        except ValueError:
            return False
        return True

    def describe(self, field_name: str) -> str:
        return "Invalid phone number format"


@dataclass(frozen=True)
class Between(FieldRule):
    """Inclusive numeric range."""

    minimum: int
    maximum: int
    message: str | None = None
    code: ErrorCode = ErrorCode.INVALID_VALUE

    def is_valid(self, value: Any) -> bool:
        return value is None or self.minimum <= value <= self.maximum

    def describe(self, field_name: str) -> str:
        return f"{_label(field_name)} must be between {self.minimum} and {self.maximum}"


@dataclass(frozen=True)
class Must(FieldRule):
    """Arbitrary predicate over the value."""

    predicate: Callable[[Any], bool] = field(compare=False)
    message: str | None = None
    code: ErrorCode = ErrorCode.INVALID_VALUE

    def is_valid(self, value: Any) -> bool:
        return value is None or self.predicate(value)

    def describe(self, field_name: str) -> str:
        return f"{_label(field_name)} is invalid"
