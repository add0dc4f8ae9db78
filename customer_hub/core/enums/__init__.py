"""Core enums."""

from customer_hub.core.enums.environment import Environment
from customer_hub.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
