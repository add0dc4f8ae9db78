"""Validators for customer requests.

Field rules mirror the domain invariants (name, email, phone) so invalid
input is rejected with field-level errors before any handler runs. Email
uniqueness is an async rule checked against the repository.
"""

from collections.abc import Sequence
from typing import Any

from customer_hub.application.commands import CreateCustomer, UpdateCustomer
from customer_hub.application.cqrs.scope import RequestScope
from customer_hub.application.queries import SearchCustomers
from customer_hub.application.validation.rules import (
    Between,
    Matches,
    MaxLength,
    NotEmpty,
    ValidEmail,
    ValidPhone,
)
from customer_hub.application.validation.validator import RequestValidator
from customer_hub.core.enums import ErrorCode
from customer_hub.domain.errors import CustomerError
from customer_hub.domain.validators import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_PATTERN,
)

NAME_FORMAT_MESSAGE = "Name can only contain letters, spaces, and . ' -"


def _declare_contact_rules(validator: RequestValidator[Any]) -> None:
    validator.rule_for(
        "name",
        NotEmpty(),
        MaxLength(NAME_MAX_LENGTH, code=ErrorCode.INVALID_NAME),
        Matches(NAME_PATTERN, message=NAME_FORMAT_MESSAGE, code=ErrorCode.INVALID_NAME),
    )
    validator.rule_for(
        "email",
        NotEmpty(),
        MaxLength(EMAIL_MAX_LENGTH, code=ErrorCode.INVALID_EMAIL),
        ValidEmail(),
    )
    validator.rule_for("phone", NotEmpty(), ValidPhone())


async def _email_is_unique(request: CreateCustomer, scope: RequestScope) -> bool:
    return not await scope.uow.customers.exists_by_email(request.email)


async def _email_is_unique_for_other_customers(
    request: UpdateCustomer, scope: RequestScope
) -> bool:
    customers = scope.uow.customers
    # Unknown or deleted customer: the handler reports not-found
    if not await customers.exists(request.customer_id):
        return True
    return not await customers.exists_by_email(
        request.email, exclude_id=request.customer_id
    )


class CreateCustomerValidator(RequestValidator[CreateCustomer]):
    resource_type = "Customer"

    def __init__(self) -> None:
        super().__init__()
        _declare_contact_rules(self)
        self.rule_async(
            _email_is_unique,
            field="email",
            message=CustomerError.EMAIL_ALREADY_EXISTS,
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
        )


class UpdateCustomerValidator(RequestValidator[UpdateCustomer]):
    resource_type = "Customer"

    def __init__(self) -> None:
        super().__init__()
        _declare_contact_rules(self)
        self.rule_async(
            _email_is_unique_for_other_customers,
            field="email",
            message=CustomerError.EMAIL_ALREADY_EXISTS,
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
        )


class SearchCustomersValidator(RequestValidator[SearchCustomers]):
    """Paging bounds for customer search.

    Args:
        max_page_size: Largest accepted page size.
    """

    resource_type = "Customer"

    def __init__(self, max_page_size: int) -> None:
        super().__init__()
        self.rule(
            lambda q: q.page_number >= 1,
            field="page_number",
            message="Page number must be at least 1",
            code=ErrorCode.INVALID_PAGINATION,
        )
        self.rule_for(
            "page_size",
            Between(
                1,
                max_page_size,
                message=f"Page size must be between 1 and {max_page_size}",
                code=ErrorCode.INVALID_PAGINATION,
            ),
        )


def build_customer_validators(
    max_page_size: int,
) -> dict[type, Sequence[RequestValidator[Any]]]:
    """Validators keyed by request type, ready for ValidationBehavior."""
    return {
        CreateCustomer: (CreateCustomerValidator(),),
        UpdateCustomer: (UpdateCustomerValidator(),),
        SearchCustomers: (SearchCustomersValidator(max_page_size),),
    }
