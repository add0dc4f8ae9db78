"""Domain validation functions."""

from customer_hub.domain.validators.functions import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_PATTERN,
    validate_phone_number,
)

__all__ = [
    "EMAIL_MAX_LENGTH",
    "NAME_MAX_LENGTH",
    "NAME_PATTERN",
    "validate_phone_number",
]
