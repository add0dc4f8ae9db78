"""Customer notification event handler.

Subscribes to CustomerCreated and sends the welcome email in the
background, so the create request never waits on (or fails because of)
email delivery.

Usage:
    handler = NotificationEventHandler(email_service, background, logger)
    event_bus.subscribe(CustomerCreated, handler.handle_customer_created)
"""

from customer_hub.domain.events import CustomerCreated, DomainEvent
from customer_hub.domain.protocols import (
    BackgroundTaskProtocol,
    EmailServiceProtocol,
    LoggerProtocol,
)


class NotificationEventHandler:
    """Schedules outbound customer notifications.

    Args:
        email_service: Outbound email adapter.
        background: Fire-and-forget task runner.
        logger: Structured logger.
    """

    def __init__(
        self,
        email_service: EmailServiceProtocol,
        background: BackgroundTaskProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._email_service = email_service
        self._background = background
        self._logger = logger

    async def handle_customer_created(self, event: DomainEvent) -> None:
        """Schedule the welcome email for a new customer."""
        if not isinstance(event, CustomerCreated):
            return

        email_service = self._email_service
        to_email = event.email
        customer_name = event.name

        self._background.schedule(
            lambda: email_service.send_welcome_email(to_email, customer_name),
            name=f"welcome_email:{event.customer_id}",
        )
        self._logger.debug(
            "welcome_email_scheduled", customer_id=str(event.customer_id)
        )
