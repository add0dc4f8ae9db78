"""Pipeline behaviors (registration order: logging, performance, validation)."""

from customer_hub.application.cqrs.behaviors.logging_behavior import LoggingBehavior
from customer_hub.application.cqrs.behaviors.performance_behavior import (
    PerformanceBehavior,
)
from customer_hub.application.cqrs.behaviors.validation_behavior import (
    ValidationBehavior,
)

__all__ = ["LoggingBehavior", "PerformanceBehavior", "ValidationBehavior"]
