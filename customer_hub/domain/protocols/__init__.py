"""Domain protocols (ports).

Structural interfaces the application layer depends on. Infrastructure
provides the adapters.
"""

from customer_hub.domain.protocols.background_task_protocol import (
    BackgroundTaskProtocol,
    CoroutineFactory,
)
from customer_hub.domain.protocols.capability_protocols import (
    Auditable,
    Identified,
    SoftDeletable,
)
from customer_hub.domain.protocols.customer_repository import CustomerRepository
from customer_hub.domain.protocols.email_service_protocol import EmailServiceProtocol
from customer_hub.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from customer_hub.domain.protocols.logger_protocol import LoggerProtocol
from customer_hub.domain.protocols.repository import Repository
from customer_hub.domain.protocols.unit_of_work_protocol import UnitOfWork

__all__ = [
    "Auditable",
    "BackgroundTaskProtocol",
    "CoroutineFactory",
    "CustomerRepository",
    "EmailServiceProtocol",
    "EventBusProtocol",
    "EventHandler",
    "Identified",
    "LoggerProtocol",
    "Repository",
    "SoftDeletable",
    "UnitOfWork",
]
