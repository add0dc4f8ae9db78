"""SQLAlchemy unit of work.

Wraps one AsyncSession: repositories stage mutations on it and commit()
makes them durable atomically. Storage-level failures the application can
act on are translated into infrastructure exceptions:

    IntegrityError (unique constraint) -> DuplicateKeyError
    StaleDataError (version mismatch)  -> ConcurrencyError

Usage:
    async with SqlAlchemyUnitOfWork(session) as uow:
        await uow.customers.add(customer)
        await uow.commit()
"""

from types import TracebackType
from typing import Self

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from customer_hub.core.errors import ConcurrencyError, DuplicateKeyError
from customer_hub.infrastructure.persistence.repositories import CustomerRepository

_UNIQUE_MARKERS = ("unique", "duplicate key")

# Constraint/column names that identify which field a unique violation hit
_UNIQUE_FIELDS = {
    "ix_customers_email_active": "email",
    "customers.email": "email",
}


def _unique_violation_field(error: IntegrityError) -> str | None:
    message = str(error.orig).lower()
    for marker, field in _UNIQUE_FIELDS.items():
        if marker in message:
            return field
    return None


class SqlAlchemyUnitOfWork:
    """Unit of work over a SQLAlchemy AsyncSession.

    Attributes:
        customers: Customer repository sharing this unit of work's session.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self.customers = CustomerRepository(session)

    async def commit(self) -> None:
        """Flush and commit all staged mutations.

        Any failure rolls back the whole batch.

        Raises:
            DuplicateKeyError: A unique constraint was violated.
            ConcurrencyError: A row changed since it was loaded.
        """
        try:
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            if not any(m in str(e.orig).lower() for m in _UNIQUE_MARKERS):
                raise
            raise DuplicateKeyError(
                "Unique constraint violated",
                field=_unique_violation_field(e),
            ) from e
        except StaleDataError as e:
            await self._session.rollback()
            raise ConcurrencyError("Row was modified or deleted concurrently") from e

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        # Anything not committed by now is discarded
        if exc_type is not None or self._session.in_transaction():
            await self.rollback()
