"""UnitOfWork protocol.

A unit of work groups the repository mutations of one request into a
single atomic commit. Exiting the context without a commit rolls back.

Usage:
    async with uow:
        await uow.customers.add(customer)
        await uow.commit()
"""

from types import TracebackType
from typing import Protocol, Self

from customer_hub.domain.protocols.customer_repository import CustomerRepository


class UnitOfWork(Protocol):
    """Transaction boundary over the customer repository.

    Attributes:
        customers: Customer repository bound to this unit of work.
    """

    customers: CustomerRepository

    async def commit(self) -> None:
        """Persist all staged mutations atomically.

        Raises:
            DuplicateKeyError: A unique constraint was violated.
            ConcurrencyError: A row changed since it was loaded.
        """
        ...

    async def rollback(self) -> None:
        """Discard all staged mutations."""
        ...

    async def __aenter__(self) -> Self: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...
