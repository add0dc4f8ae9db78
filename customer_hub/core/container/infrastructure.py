"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Database (SQLAlchemy async engine)
- Email (stub)
- Background notifications (asyncio tasks)

Request-scoped:
- get_db_session(): one AsyncSession per request
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from customer_hub.core.config import get_settings
from customer_hub.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from customer_hub.infrastructure.background.notification_dispatcher import (
        NotificationDispatcher,
    )
    from customer_hub.domain.protocols import EmailServiceProtocol, LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - everything else, or LOG_JSON=true: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from customer_hub.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    logger = ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)
    return logger.bind(app=settings.app_name, environment=settings.environment.value)


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_email_service() -> "EmailServiceProtocol":
    """Get email service singleton (app-scoped).

    Returns:
        StubEmailService (logs instead of delivering).
    """
    from customer_hub.infrastructure.email.stub_email_service import StubEmailService

    return StubEmailService(logger=get_logger())


@lru_cache()
def get_notification_dispatcher() -> "NotificationDispatcher":
    """Get background notification dispatcher singleton (app-scoped).

    Drained during application shutdown (see main.lifespan).
    """
    from customer_hub.infrastructure.background.notification_dispatcher import (
        NotificationDispatcher,
    )

    return NotificationDispatcher(logger=get_logger())


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Yields:
        Database session for request duration (rolled back on exception,
        always closed).
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
