"""Customer queries."""

from customer_hub.application.queries.customer_queries import (
    GetCustomerById,
    ListVipCustomers,
    SearchCustomers,
)

__all__ = ["GetCustomerById", "ListVipCustomers", "SearchCustomers"]
