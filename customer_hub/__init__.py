"""Customer Hub - layered customer-management service built on a CQRS pipeline."""

__version__ = "0.1.0"
