"""ListVipCustomers query handler."""

from customer_hub.application.dtos import CustomerResult, to_customer_result
from customer_hub.application.queries.customer_queries import ListVipCustomers
from customer_hub.core.errors import DomainError
from customer_hub.core.result import Result, Success
from customer_hub.domain.protocols import UnitOfWork


class ListVipCustomersHandler:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(
        self, query: ListVipCustomers
    ) -> Result[list[CustomerResult], DomainError]:
        customers = await self._uow.customers.list_vip()
        return Success(value=[to_customer_result(c) for c in customers])
