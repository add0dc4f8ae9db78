"""DeleteCustomer command handler (logical delete)."""

from customer_hub.application.commands.customer_commands import DeleteCustomer
from customer_hub.core.errors import ConcurrencyError, DomainError
from customer_hub.core.result import Failure, Result, Success
from customer_hub.domain.errors import CustomerError
from customer_hub.domain.events import CustomerDeleted
from customer_hub.domain.protocols import EventBusProtocol, LoggerProtocol, UnitOfWork


class DeleteCustomerHandler:
    """Handler for DeleteCustomer command.

    The customer row stays in storage flagged as deleted; every later read
    treats it as absent.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: DeleteCustomer) -> Result[None, DomainError]:
        """Handle DeleteCustomer command.

        Returns:
            Success(None): Customer deleted.
            Failure(NotFoundError): Customer absent or already deleted.
            Failure(ConflictError): Concurrent modification.
        """
        customer = await self._uow.customers.get_by_id(cmd.customer_id)
        if customer is None:
            return Failure(error=CustomerError.not_found(cmd.customer_id))

        result = customer.mark_deleted()
        if isinstance(result, Failure):
            return result

        await self._uow.customers.remove(customer)
        try:
            await self._uow.commit()
        except ConcurrencyError:
            return Failure(error=CustomerError.concurrency_conflict())

        self._logger.info("customer_deleted", customer_id=str(customer.id))
        await self._event_bus.publish(CustomerDeleted(customer_id=customer.id))
        return Success(value=None)
