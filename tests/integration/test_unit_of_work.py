"""Integration tests for SqlAlchemyUnitOfWork.

Storage failures are translated at commit time:
- unique email among non-deleted customers -> DuplicateKeyError(field="email")
- stale version -> ConcurrencyError
"""

import pytest
from sqlalchemy import update

from customer_hub.core.errors import ConcurrencyError, DuplicateKeyError
from customer_hub.infrastructure.persistence import SqlAlchemyUnitOfWork
from customer_hub.infrastructure.persistence.models.customer import CustomerModel
from tests.conftest import make_customer


@pytest.mark.integration
class TestUnitOfWorkCommit:
    async def test_commit_makes_changes_visible(self, test_database, uow):
        customer = make_customer()

        await uow.customers.add(customer)
        await uow.commit()

        async with test_database.get_session() as other:
            loaded = await SqlAlchemyUnitOfWork(other).customers.get_by_id(customer.id)
        assert loaded is not None

    async def test_duplicate_email_raises_duplicate_key(self, uow):
        # Arrange
        await uow.customers.add(make_customer(email="ada@example.com"))
        await uow.commit()

        # Act
        await uow.customers.add(
            make_customer(name="Ada Again", email="ada@example.com")
        )
        with pytest.raises(DuplicateKeyError) as exc_info:
            await uow.commit()

        # Assert
        assert exc_info.value.field == "email"
        assert len(await uow.customers.get_all()) == 1

    async def test_email_of_deleted_customer_can_be_reused(self, uow):
        # Arrange
        original = make_customer(email="ada@example.com")
        await uow.customers.add(original)
        await uow.commit()
        original.mark_deleted()
        await uow.customers.remove(original)
        await uow.commit()

        # Act
        replacement = make_customer(name="Ada Reborn", email="ada@example.com")
        await uow.customers.add(replacement)
        await uow.commit()

        # Assert
        found = await uow.customers.find_by_email("ada@example.com")
        assert found is not None
        assert found.id == replacement.id

    async def test_stale_version_raises_concurrency_error(self, session, uow):
        # Arrange
        customer = make_customer()
        await uow.customers.add(customer)
        await uow.commit()
        loaded = await uow.customers.get_by_id(customer.id)
        # Another writer bumps the version behind this session's back
        await session.execute(
            update(CustomerModel)
            .where(CustomerModel.id == customer.id)
            .values(version=CustomerModel.version + 1)
            .execution_options(synchronize_session=False)
        )
        await session.commit()

        # Act
        loaded.suspend()
        await uow.customers.update(loaded)

        # Assert
        with pytest.raises(ConcurrencyError):
            await uow.commit()

    async def test_context_manager_discards_uncommitted_work(self, test_database):
        customer = make_customer()

        async with test_database.get_session() as session:
            async with SqlAlchemyUnitOfWork(session) as uow:
                await uow.customers.add(customer)

        async with test_database.get_session() as other:
            loaded = await SqlAlchemyUnitOfWork(other).customers.get_by_id(customer.id)
        assert loaded is None
