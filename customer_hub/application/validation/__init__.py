"""Declarative request validation."""

from customer_hub.application.validation.rules import (
    Between,
    FieldRule,
    Matches,
    MaxLength,
    MinLength,
    Must,
    NotEmpty,
    ValidEmail,
    ValidPhone,
)
from customer_hub.application.validation.validator import RequestValidator

__all__ = [
    "Between",
    "FieldRule",
    "Matches",
    "MaxLength",
    "MinLength",
    "Must",
    "NotEmpty",
    "RequestValidator",
    "ValidEmail",
    "ValidPhone",
]
