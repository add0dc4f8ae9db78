"""Application layer errors."""

from customer_hub.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    to_application_error,
)

__all__ = ["ApplicationError", "ApplicationErrorCode", "to_application_error"]
