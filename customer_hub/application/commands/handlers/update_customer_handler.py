"""UpdateCustomer command handler.

Replaces a customer's name and contact details. Returns not found for
absent or deleted customers, a conflict when the new email belongs to
another customer (or the row changed concurrently), and the updated read
model on success.
"""

from customer_hub.application.commands.customer_commands import UpdateCustomer
from customer_hub.application.dtos import CustomerResult, to_customer_result
from customer_hub.core.errors import ConcurrencyError, DomainError, DuplicateKeyError
from customer_hub.core.result import Failure, Result, Success
from customer_hub.domain.errors import CustomerError
from customer_hub.domain.events import CustomerUpdated
from customer_hub.domain.protocols import EventBusProtocol, LoggerProtocol, UnitOfWork
from customer_hub.domain.value_objects import Email, PhoneNumber


class UpdateCustomerHandler:
    """Handler for UpdateCustomer command."""

    def __init__(
        self,
        uow: UnitOfWork,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._event_bus = event_bus
        self._logger = logger

    async def handle(
        self, cmd: UpdateCustomer
    ) -> Result[CustomerResult, DomainError]:
        """Handle UpdateCustomer command.

        Returns:
            Success(CustomerResult): Customer updated.
            Failure(NotFoundError): Customer absent or deleted.
            Failure(ConflictError): Email taken or concurrent modification.
            Failure(BusinessRuleError): Entity rejected the update.
            Failure(ValidationFailedError): Input rejected by domain invariants.
        """
        customer = await self._uow.customers.get_by_id(cmd.customer_id)
        if customer is None:
            return Failure(error=CustomerError.not_found(cmd.customer_id))

        try:
            email = Email(cmd.email)
            phone = PhoneNumber(cmd.phone)
        except ValueError as e:
            return Failure(error=CustomerError.invalid_input(str(e)))

        if email != customer.email and await self._uow.customers.exists_by_email(
            email.value, exclude_id=customer.id
        ):
            return Failure(error=CustomerError.email_conflict())

        try:
            result = customer.update_contact_info(cmd.name, email, phone)
        except ValueError as e:
            return Failure(error=CustomerError.invalid_input(str(e)))
        if isinstance(result, Failure):
            return result

        await self._uow.customers.update(customer)
        try:
            await self._uow.commit()
        except DuplicateKeyError:
            return Failure(error=CustomerError.email_conflict())
        except ConcurrencyError:
            self._logger.warning(
                "customer_update_conflict", customer_id=str(customer.id)
            )
            return Failure(error=CustomerError.concurrency_conflict())

        self._logger.info("customer_updated", customer_id=str(customer.id))
        await self._event_bus.publish(
            CustomerUpdated(customer_id=customer.id, email=customer.email.value)
        )
        return Success(value=to_customer_result(customer))
