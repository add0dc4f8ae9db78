"""SearchCustomers query handler.

Paging bounds are enforced by the request validator; the repository still
raises ValueError for out-of-range values when called directly.
"""

from customer_hub.application.dtos import CustomerPageResult, to_customer_page_result
from customer_hub.application.queries.customer_queries import SearchCustomers
from customer_hub.core.errors import DomainError
from customer_hub.core.result import Result, Success
from customer_hub.domain.protocols import UnitOfWork
from customer_hub.domain.value_objects import CustomerSearchCriteria


class SearchCustomersHandler:
    """Handler for SearchCustomers query."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(
        self, query: SearchCustomers
    ) -> Result[CustomerPageResult, DomainError]:
        """Filter and page customers.

        Returns:
            Success(CustomerPageResult): Matching page (possibly empty).
        """
        criteria = CustomerSearchCriteria(
            name=query.name,
            email=query.email,
            type=query.type,
            status=query.status,
            page_number=query.page_number,
            page_size=query.page_size,
        )
        page = await self._uow.customers.search(criteria)
        return Success(value=to_customer_page_result(page))
