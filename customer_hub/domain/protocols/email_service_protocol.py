"""EmailServiceProtocol - Domain protocol for outbound customer notifications.

Infrastructure provides concrete implementations (StubEmailService for
development and tests).
"""

from typing import Protocol


class EmailServiceProtocol(Protocol):
    """Protocol for email sending operations.

    Implementations:
        - StubEmailService: customer_hub/infrastructure/email/stub_email_service.py
    """

    async def send_welcome_email(self, to_email: str, customer_name: str) -> None:
        """Send welcome email to a newly registered customer.

        Args:
            to_email: Recipient email address.
            customer_name: Name used in the greeting.
        """
        ...
