"""Application DTOs."""

from customer_hub.application.dtos.customer_dtos import (
    CustomerPageResult,
    CustomerResult,
    to_customer_page_result,
    to_customer_result,
)

__all__ = [
    "CustomerPageResult",
    "CustomerResult",
    "to_customer_page_result",
    "to_customer_result",
]
