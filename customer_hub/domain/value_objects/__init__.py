"""Domain value objects."""

from customer_hub.domain.value_objects.customer_search_criteria import (
    CustomerSearchCriteria,
)
from customer_hub.domain.value_objects.email import Email
from customer_hub.domain.value_objects.page import Page
from customer_hub.domain.value_objects.phone_number import PhoneNumber

__all__ = ["CustomerSearchCriteria", "Email", "Page", "PhoneNumber"]
