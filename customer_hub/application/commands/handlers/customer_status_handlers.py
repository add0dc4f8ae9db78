"""Handlers for customer tier and status transitions.

PromoteCustomerToVip, SuspendCustomer and ActivateCustomer share one flow:
load, apply the entity transition, persist, publish. Only the transition
and the published event differ.
"""

from collections.abc import Callable
from uuid import UUID

from customer_hub.application.commands.customer_commands import (
    ActivateCustomer,
    PromoteCustomerToVip,
    SuspendCustomer,
)
from customer_hub.application.dtos import CustomerResult, to_customer_result
from customer_hub.core.errors import BusinessRuleError, ConcurrencyError, DomainError
from customer_hub.core.result import Failure, Result, Success
from customer_hub.domain.entities import Customer
from customer_hub.domain.errors import CustomerError
from customer_hub.domain.events import (
    CustomerActivated,
    CustomerPromotedToVip,
    CustomerSuspended,
    DomainEvent,
)
from customer_hub.domain.protocols import EventBusProtocol, LoggerProtocol, UnitOfWork

type Transition = Callable[[Customer], Result[None, BusinessRuleError]]


class CustomerTransitionHandler:
    """Shared load/transition/commit/publish flow."""

    def __init__(
        self,
        uow: UnitOfWork,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._event_bus = event_bus
        self._logger = logger

    async def _apply(
        self,
        customer_id: UUID,
        transition: Transition,
        event_factory: Callable[[UUID], DomainEvent],
        log_event: str,
    ) -> Result[CustomerResult, DomainError]:
        customer = await self._uow.customers.get_by_id(customer_id)
        if customer is None:
            return Failure(error=CustomerError.not_found(customer_id))

        result = transition(customer)
        if isinstance(result, Failure):
            self._logger.info(
                "customer_transition_rejected",
                customer_id=str(customer_id),
                error_code=result.error.code.value,
            )
            return result

        await self._uow.customers.update(customer)
        try:
            await self._uow.commit()
        except ConcurrencyError:
            return Failure(error=CustomerError.concurrency_conflict())

        self._logger.info(log_event, customer_id=str(customer_id))
        await self._event_bus.publish(event_factory(customer.id))
        return Success(value=to_customer_result(customer))


class PromoteCustomerToVipHandler(CustomerTransitionHandler):
    """Handler for PromoteCustomerToVip command.

    Returns Failure(BusinessRuleError) when the customer is already VIP.
    """

    async def handle(
        self, cmd: PromoteCustomerToVip
    ) -> Result[CustomerResult, DomainError]:
        return await self._apply(
            cmd.customer_id,
            Customer.promote_to_vip,
            lambda customer_id: CustomerPromotedToVip(customer_id=customer_id),
            "customer_promoted_to_vip",
        )


class SuspendCustomerHandler(CustomerTransitionHandler):
    async def handle(self, cmd: SuspendCustomer) -> Result[CustomerResult, DomainError]:
        return await self._apply(
            cmd.customer_id,
            Customer.suspend,
            lambda customer_id: CustomerSuspended(customer_id=customer_id),
            "customer_suspended",
        )


class ActivateCustomerHandler(CustomerTransitionHandler):
    async def handle(
        self, cmd: ActivateCustomer
    ) -> Result[CustomerResult, DomainError]:
        return await self._apply(
            cmd.customer_id,
            Customer.activate,
            lambda customer_id: CustomerActivated(customer_id=customer_id),
            "customer_activated",
        )
