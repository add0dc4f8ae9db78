"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. Expected outcomes (validation failures, missing
customers, duplicate emails, rejected state transitions) travel as Failure
values; exceptions are reserved for infrastructure faults.

Usage:
    def find(customer_id: UUID) -> Result[Customer, NotFoundError]:
        customer = registry.get(customer_id)
        if customer is None:
            return Failure(error=NotFoundError(...))
        return Success(value=customer)

    match find(customer_id):
        case Success(value=customer):
            print(customer.name)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
