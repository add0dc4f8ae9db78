"""Pytest configuration shared by all test layers.

Environment variables are set before any customer_hub import so the module
level Settings instance sees the test configuration:
- in-memory SQLite (aiosqlite) as the application database
- schema created by the lifespan (API tests run the real app)
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DB_CREATE_SCHEMA", "true")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from collections.abc import AsyncGenerator  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from customer_hub.domain.entities import Customer  # noqa: E402
from customer_hub.domain.enums import CustomerStatus, CustomerType  # noqa: E402
from customer_hub.domain.value_objects import Email, PhoneNumber  # noqa: E402
from customer_hub.infrastructure.persistence import (  # noqa: E402
    Database,
    SqlAlchemyUnitOfWork,
)


# =============================================================================
# Test helpers
# =============================================================================


def make_customer(
    name: str = "Ada Lovelace",
    email: str = "ada@example.com",
    phone: str = "+14155552671",
    type: CustomerType = CustomerType.REGULAR,
    status: CustomerStatus = CustomerStatus.ACTIVE,
) -> Customer:
    """Create a Customer entity with sensible defaults."""
    customer = Customer.create(name=name, email=Email(email), phone=PhoneNumber(phone))
    customer.type = type
    customer.status = status
    return customer


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double whose bind() returns itself, so calls stay observable."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


# =============================================================================
# Database fixtures (fresh in-memory database per test)
# =============================================================================


@pytest_asyncio.fixture
async def test_database() -> AsyncGenerator[Database, None]:
    """Provide a fresh in-memory database with the schema created."""
    database = Database(database_url="sqlite+aiosqlite:///:memory:")
    await database.create_all()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def session(test_database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with test_database.get_session() as session:
        yield session


@pytest_asyncio.fixture
async def uow(session: AsyncSession) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session)
