"""Unit tests for declarative request validation.

Covers the built-in field rules, RequestValidator chain semantics
(stop at first failure per field, declaration order) and the customer
validators including their async uniqueness rules.
"""

import re
from dataclasses import dataclass
from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from customer_hub.application.commands import CreateCustomer, UpdateCustomer
from customer_hub.application.queries import SearchCustomers
from customer_hub.application.validation import (
    Between,
    Matches,
    MaxLength,
    MinLength,
    Must,
    NotEmpty,
    RequestValidator,
    ValidEmail,
    ValidPhone,
)
from customer_hub.application.validation.customer_validators import (
    CreateCustomerValidator,
    SearchCustomersValidator,
    UpdateCustomerValidator,
    build_customer_validators,
)
from customer_hub.core.enums import ErrorCode


@dataclass(frozen=True, kw_only=True)
class SampleRequest:
    name: str | None = "Ada"
    age: int | None = 30


def _scope_with_email_taken(taken: bool, customer_exists: bool = True) -> MagicMock:
    scope = MagicMock()
    scope.uow.customers.exists_by_email = AsyncMock(return_value=taken)
    scope.uow.customers.exists = AsyncMock(return_value=customer_exists)
    return scope


# =============================================================================
# Field rules
# =============================================================================


@pytest.mark.unit
class TestFieldRules:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_not_empty_rejects_missing_or_blank(self, value):
        error = NotEmpty().validate("name", value)

        assert error is not None
        assert error.field == "name"
        assert error.message == "Name is required"
        assert error.code == ErrorCode.REQUIRED_FIELD_MISSING

    def test_not_empty_accepts_value(self):
        assert NotEmpty().validate("name", "Ada") is None

    def test_max_length_default_message(self):
        error = MaxLength(3).validate("first_name", "Adaa")

        assert error is not None
        assert error.message == "First name cannot exceed 3 characters"

    def test_min_length(self):
        assert MinLength(2).validate("name", "A") is not None
        assert MinLength(2).validate("name", "Ad") is None

    def test_custom_message_and_code_override_defaults(self):
        rule = Matches(
            re.compile(r"^\d+$"), message="Digits only", code=ErrorCode.INVALID_VALUE
        )

        error = rule.validate("pin", "12a")

        assert error is not None
        assert error.message == "Digits only"
        assert error.code == ErrorCode.INVALID_VALUE

    def test_valid_email(self):
        assert ValidEmail().validate("email", "ada@example.com") is None
        error = ValidEmail().validate("email", "not-an-email")
        assert error is not None
        assert error.message == "A valid email address is required"

    def test_valid_phone(self):
        assert ValidPhone().validate("phone", "+14155552671") is None
        error = ValidPhone().validate("phone", "abc")
        assert error is not None
        assert error.message == "Invalid phone number format"

    def test_between_is_inclusive(self):
        rule = Between(1, 100)

        assert rule.validate("page_size", 1) is None
        assert rule.validate("page_size", 100) is None
        error = rule.validate("page_size", 101)
        assert error is not None
        assert error.message == "Page size must be between 1 and 100"

    def test_must(self):
        rule = Must(lambda v: v % 2 == 0)

        assert rule.validate("count", 4) is None
        assert rule.validate("count", 3) is not None

    @pytest.mark.parametrize(
        "rule",
        [
            MaxLength(1),
            MinLength(5),
            Matches(re.compile("x")),
            ValidEmail(),
            ValidPhone(),
            Between(1, 2),
            Must(lambda v: False),
        ],
    )
    def test_rules_other_than_not_empty_accept_none(self, rule):
        assert rule.validate("field", None) is None


# =============================================================================
# RequestValidator
# =============================================================================


@pytest.mark.unit
class TestRequestValidator:
    def test_field_chain_stops_at_first_failure(self):
        validator = RequestValidator[SampleRequest]().rule_for(
            "name", NotEmpty(), MinLength(2), MaxLength(10)
        )

        errors = validator.validate(SampleRequest(name=""))

        assert [e.message for e in errors] == ["Name is required"]

    def test_violations_keep_declaration_order(self):
        validator = (
            RequestValidator[SampleRequest]()
            .rule_for("age", Between(0, 120))
            .rule_for("name", NotEmpty())
        )

        errors = validator.validate(SampleRequest(name=None, age=200))

        assert [e.field for e in errors] == ["age", "name"]

    def test_cross_field_rule(self):
        validator = RequestValidator[SampleRequest]().rule(
            lambda r: r.name != "Admin" or (r.age or 0) >= 18,
            field=None,
            message="Admins must be adults",
        )

        errors = validator.validate(SampleRequest(name="Admin", age=10))

        assert len(errors) == 1
        assert errors[0].field is None
        assert errors[0].code == ErrorCode.VALIDATION_FAILED

    def test_valid_request_has_no_errors(self):
        validator = RequestValidator[SampleRequest]().rule_for("name", NotEmpty())

        assert validator.validate(SampleRequest()) == []

    async def test_async_rules_report_violations(self):
        async def never_ok(request, scope):
            return False

        validator = RequestValidator[SampleRequest]().rule_async(
            never_ok, field="name", message="Taken", code=ErrorCode.RESOURCE_CONFLICT
        )

        errors = await validator.validate_async(SampleRequest(), MagicMock())

        assert len(errors) == 1
        assert errors[0].message == "Taken"
        assert errors[0].code == ErrorCode.RESOURCE_CONFLICT


# =============================================================================
# Customer validators
# =============================================================================


@pytest.mark.unit
class TestCreateCustomerValidator:
    def test_valid_command(self):
        command = CreateCustomer(
            name="Ada Lovelace", email="ada@example.com", phone="+14155552671"
        )

        assert CreateCustomerValidator().validate(command) == []

    def test_all_fields_empty_reports_three_required_errors(self):
        command = CreateCustomer(name="", email="", phone="")

        errors = CreateCustomerValidator().validate(command)

        assert [e.field for e in errors] == ["name", "email", "phone"]
        assert all(e.code == ErrorCode.REQUIRED_FIELD_MISSING for e in errors)

    def test_name_with_digits_rejected(self):
        command = CreateCustomer(
            name="R2D2", email="r2@example.com", phone="+14155552671"
        )

        errors = CreateCustomerValidator().validate(command)

        assert len(errors) == 1
        assert errors[0].field == "name"
        assert errors[0].message == "Name can only contain letters, spaces, and . ' -"

    def test_name_too_long_rejected(self):
        command = CreateCustomer(
            name="A" * 101, email="a@example.com", phone="+14155552671"
        )

        errors = CreateCustomerValidator().validate(command)

        assert errors[0].code == ErrorCode.INVALID_NAME
        assert "100" in errors[0].message

    def test_invalid_email_and_phone(self):
        command = CreateCustomer(name="Ada", email="nope", phone="phone")

        errors = CreateCustomerValidator().validate(command)

        assert [e.code for e in errors] == [
            ErrorCode.INVALID_EMAIL,
            ErrorCode.INVALID_PHONE_NUMBER,
        ]

    async def test_async_rule_flags_taken_email(self):
        command = CreateCustomer(
            name="Ada", email="ada@example.com", phone="+14155552671"
        )
        scope = _scope_with_email_taken(True)

        errors = await CreateCustomerValidator().validate_async(command, scope)

        assert len(errors) == 1
        assert errors[0].code == ErrorCode.EMAIL_ALREADY_EXISTS
        assert errors[0].field == "email"
        scope.uow.customers.exists_by_email.assert_awaited_once_with("ada@example.com")

    async def test_async_rule_passes_for_free_email(self):
        command = CreateCustomer(
            name="Ada", email="ada@example.com", phone="+14155552671"
        )

        errors = await CreateCustomerValidator().validate_async(
            command, _scope_with_email_taken(False)
        )

        assert errors == []


@pytest.mark.unit
class TestUpdateCustomerValidator:
    async def test_uniqueness_excludes_the_customer_itself(self):
        customer_id = uuid7()
        command = UpdateCustomer(
            customer_id=customer_id,
            name="Ada",
            email="ada@example.com",
            phone="+14155552671",
        )
        scope = _scope_with_email_taken(False)

        errors = await UpdateCustomerValidator().validate_async(command, scope)

        assert errors == []
        scope.uow.customers.exists_by_email.assert_awaited_once_with(
            "ada@example.com", exclude_id=customer_id
        )

    async def test_taken_email_on_unknown_customer_is_left_to_the_handler(self):
        command = UpdateCustomer(
            customer_id=uuid7(),
            name="Ada",
            email="taken@example.com",
            phone="+14155552671",
        )
        scope = _scope_with_email_taken(True, customer_exists=False)

        errors = await UpdateCustomerValidator().validate_async(command, scope)

        assert errors == []
        scope.uow.customers.exists_by_email.assert_not_awaited()

    async def test_taken_email_on_existing_customer_is_conflict(self):
        command = UpdateCustomer(
            customer_id=uuid7(),
            name="Ada",
            email="taken@example.com",
            phone="+14155552671",
        )
        scope = _scope_with_email_taken(True)

        errors = await UpdateCustomerValidator().validate_async(command, scope)

        assert [e.field for e in errors] == ["email"]


@pytest.mark.unit
class TestSearchCustomersValidator:
    def test_defaults_are_valid(self):
        validator = SearchCustomersValidator(max_page_size=100)

        assert validator.validate(SearchCustomers()) == []

    @pytest.mark.parametrize(
        ("page_number", "page_size", "field"),
        [(0, 10, "page_number"), (1, 0, "page_size"), (1, 101, "page_size")],
    )
    def test_out_of_range_paging(self, page_number, page_size, field):
        query = SearchCustomers(page_number=page_number, page_size=page_size)

        errors = SearchCustomersValidator(max_page_size=100).validate(query)

        assert [e.field for e in errors] == [field]
        assert errors[0].code == ErrorCode.INVALID_PAGINATION

    def test_build_customer_validators_covers_write_and_search_requests(self):
        validators = build_customer_validators(max_page_size=50)

        assert set(validators) == {CreateCustomer, UpdateCustomer, SearchCustomers}
