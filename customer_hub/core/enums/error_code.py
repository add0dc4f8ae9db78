"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_CONFLICT)
- Business rule violations (CUSTOMER_ALREADY_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    REQUIRED_FIELD_MISSING = "required_field_missing"
    INVALID_NAME = "invalid_name"
    INVALID_EMAIL = "invalid_email"
    INVALID_PHONE_NUMBER = "invalid_phone_number"
    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"
    INVALID_PAGINATION = "invalid_pagination"
    INVALID_VALUE = "invalid_value"

    # Resource errors
    CUSTOMER_NOT_FOUND = "customer_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    CONCURRENCY_CONFLICT = "concurrency_conflict"
    RESOURCE_CONFLICT = "resource_conflict"

    # Business rule violations
    CUSTOMER_ALREADY_VIP = "customer_already_vip"
    CUSTOMER_ALREADY_SUSPENDED = "customer_already_suspended"
    CUSTOMER_ALREADY_ACTIVE = "customer_already_active"
    CUSTOMER_ALREADY_DELETED = "customer_already_deleted"
