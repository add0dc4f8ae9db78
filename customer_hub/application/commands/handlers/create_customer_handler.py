"""CreateCustomer command handler.

Flow:
1. Build value objects and the Customer entity (Regular, Active)
2. Check email uniqueness among non-deleted customers
3. Stage insert and commit
4. Publish CustomerCreated (welcome notification runs in the background)
5. Return Success(CustomerResult)

A unique-constraint violation at commit time (two concurrent creations with
the same email) is reported as the same ConflictError as the pre-check.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (unit of work is injected via protocol)
"""

from customer_hub.application.commands.customer_commands import CreateCustomer
from customer_hub.application.dtos import CustomerResult, to_customer_result
from customer_hub.core.errors import DomainError, DuplicateKeyError
from customer_hub.core.result import Failure, Result, Success
from customer_hub.domain.entities import Customer
from customer_hub.domain.errors import CustomerError
from customer_hub.domain.events import CustomerCreated
from customer_hub.domain.protocols import EventBusProtocol, LoggerProtocol, UnitOfWork
from customer_hub.domain.value_objects import Email, PhoneNumber


class CreateCustomerHandler:
    """Handler for CreateCustomer command."""

    def __init__(
        self,
        uow: UnitOfWork,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            uow: Unit of work for the current request.
            event_bus: Event bus for publishing domain events.
            logger: Logger for structured logging.
        """
        self._uow = uow
        self._event_bus = event_bus
        self._logger = logger

    async def handle(
        self, cmd: CreateCustomer
    ) -> Result[CustomerResult, DomainError]:
        """Handle CreateCustomer command.

        Returns:
            Success(CustomerResult): Customer created.
            Failure(ConflictError): Email already used by another customer.
            Failure(ValidationFailedError): Input rejected by domain invariants.
        """
        try:
            customer = Customer.create(
                name=cmd.name,
                email=Email(cmd.email),
                phone=PhoneNumber(cmd.phone),
            )
        except ValueError as e:
            return Failure(error=CustomerError.invalid_input(str(e)))

        if await self._uow.customers.exists_by_email(customer.email.value):
            self._logger.warning("customer_create_email_conflict")
            return Failure(error=CustomerError.email_conflict())

        await self._uow.customers.add(customer)
        try:
            await self._uow.commit()
        except DuplicateKeyError:
            self._logger.warning(
                "customer_create_email_conflict", detected_by="constraint"
            )
            return Failure(error=CustomerError.email_conflict())

        self._logger.info("customer_created", customer_id=str(customer.id))

        await self._event_bus.publish(
            CustomerCreated(
                customer_id=customer.id,
                name=customer.name,
                email=customer.email.value,
            )
        )
        return Success(value=to_customer_result(customer))
