"""Centralized validation functions and limits.

Limits and patterns are defined once and reused by value objects
(construction invariants) and by the request validators of the dispatch
pipeline. Validators are pure functions that raise ValueError on failure.
"""

import re

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255

NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z\s.'-]*$")
PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$")


def validate_phone_number(v: str) -> str:
    """Validate phone number format (E.164 style, optional leading +).

    Args:
        v: Phone number to validate.

    Returns:
        Phone number without surrounding whitespace.

    Raises:
        ValueError: If phone number is blank or malformed.

    Example:
        >>> validate_phone_number("+1234567890")
        '+1234567890'
        >>> validate_phone_number("call me")
        ValueError: Invalid phone number format
    """
    phone = v.strip()
    if not phone:
        raise ValueError("Phone number is required")
    if not PHONE_PATTERN.match(phone):
        raise ValueError("Invalid phone number format")
    return phone
