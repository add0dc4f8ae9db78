"""GetCustomerById query handler."""

from customer_hub.application.dtos import CustomerResult, to_customer_result
from customer_hub.application.queries.customer_queries import GetCustomerById
from customer_hub.core.errors import NotFoundError
from customer_hub.core.result import Failure, Result, Success
from customer_hub.domain.errors import CustomerError
from customer_hub.domain.protocols import UnitOfWork


class GetCustomerByIdHandler:
    """Handler for GetCustomerById query.

    Absent and deleted customers are both reported as NotFoundError.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(
        self, query: GetCustomerById
    ) -> Result[CustomerResult, NotFoundError]:
        customer = await self._uow.customers.get_by_id(query.customer_id)
        if customer is None:
            return Failure(error=CustomerError.not_found(query.customer_id))
        return Success(value=to_customer_result(customer))
