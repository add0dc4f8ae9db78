"""Runtime environments recognised by Settings."""

from enum import Enum


class Environment(str, Enum):
    """Where the service is running.

    Only DEVELOPMENT renders console logs by default; every other
    environment emits JSON unless LOG_JSON overrides it.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def json_logs_by_default(self) -> bool:
        return self is not Environment.DEVELOPMENT
