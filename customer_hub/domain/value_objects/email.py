"""Email value object with validation.

Immutable value object that validates email format.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from customer_hub.domain.validators import EMAIL_MAX_LENGTH


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses email-validator library for RFC-compliant validation. The stored
    value is lowercased so uniqueness checks are case-insensitive.

    Attributes:
        value: The email address string (validated, lowercase)

    Raises:
        ValueError: If email format is invalid

    Example:
        >>> email = Email("John@Example.com")
        >>> str(email)
        'john@example.com'
        >>> Email("invalid")
        Traceback (most recent call last):
        ...
        ValueError: Invalid email: ...
    """

    value: str

    def __post_init__(self) -> None:
        """Validate email format after initialization.

        Raises:
            ValueError: If email format is invalid.
        """
        if len(self.value) > EMAIL_MAX_LENGTH:
            raise ValueError(
                f"Invalid email: cannot exceed {EMAIL_MAX_LENGTH} characters"
            )
        try:
            # No deliverability check (no DNS lookups on the request path)
            validated = validate_email(self.value.strip(), check_deliverability=False)
            object.__setattr__(self, "value", validated.normalized.lower())
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e

    def __str__(self) -> str:
        """Return email address as string."""
        return self.value

    def __repr__(self) -> str:
        """Return repr for debugging."""
        return f"Email('{self.value}')"
