"""Phone number value object."""

from dataclasses import dataclass

from customer_hub.domain.validators import validate_phone_number


@dataclass(frozen=True)
class PhoneNumber:
    """Phone number in E.164-like format (optional leading ``+``, up to 15 digits).

    Raises:
        ValueError: If the number is blank or malformed.

    Example:
        >>> PhoneNumber("+1234567890").value
        '+1234567890'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the phone number."""
        object.__setattr__(self, "value", validate_phone_number(self.value))

    def __str__(self) -> str:
        """Return phone number as string."""
        return self.value
