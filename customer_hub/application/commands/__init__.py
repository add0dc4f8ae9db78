"""Customer commands."""

from customer_hub.application.commands.customer_commands import (
    ActivateCustomer,
    CreateCustomer,
    DeleteCustomer,
    PromoteCustomerToVip,
    SuspendCustomer,
    UpdateCustomer,
)

__all__ = [
    "ActivateCustomer",
    "CreateCustomer",
    "DeleteCustomer",
    "PromoteCustomerToVip",
    "SuspendCustomer",
    "UpdateCustomer",
]
