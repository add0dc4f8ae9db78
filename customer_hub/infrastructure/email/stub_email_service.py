"""Stub email service (development and tests).

Logs outbound emails instead of delivering them and keeps a record of what
was sent, so tests can assert on notifications.
"""

from dataclasses import dataclass

from customer_hub.domain.protocols import LoggerProtocol


@dataclass(frozen=True, kw_only=True)
class SentEmail:
    to_email: str
    subject: str
    body: str


class StubEmailService:
    """EmailServiceProtocol implementation that only logs.

    Attributes:
        sent: Emails "sent" so far, in order.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self.sent: list[SentEmail] = []

    async def send_welcome_email(self, to_email: str, customer_name: str) -> None:
        email = SentEmail(
            to_email=to_email,
            subject="Welcome to Customer Hub",
            body=f"Hello {customer_name}, your customer account is ready.",
        )
        self.sent.append(email)
        self._logger.info("email_sent", template="welcome", stub=True)
