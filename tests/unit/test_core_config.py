"""Unit tests for Settings validation and the structlog console adapter."""

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from customer_hub.core.config import Settings
from customer_hub.core.enums import Environment
from customer_hub.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.default_page_size == 10
        assert settings.max_page_size == 100
        assert settings.slow_request_threshold_ms == 500
        assert settings.database_url.startswith("sqlite+aiosqlite")

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    @pytest.mark.parametrize(
        "field", ["default_page_size", "max_page_size", "slow_request_threshold_ms"]
    )
    def test_limits_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: 0})

    def test_default_page_size_cannot_exceed_max(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_page_size=50, max_page_size=20)

    @pytest.mark.parametrize(
        ("environment", "log_json", "expected"),
        [
            (Environment.DEVELOPMENT, None, False),
            (Environment.PRODUCTION, None, True),
            (Environment.TESTING, None, True),
            (Environment.CI, None, True),
            (Environment.DEVELOPMENT, True, True),
            (Environment.PRODUCTION, False, False),
        ],
    )
    def test_json_logs(self, environment, log_json, expected):
        settings = Settings(_env_file=None, environment=environment, log_json=log_json)

        assert settings.use_json_logs is expected

    @pytest.mark.parametrize("environment", list(Environment))
    def test_only_development_defaults_to_console_logs(self, environment):
        expected = environment is not Environment.DEVELOPMENT

        assert environment.json_logs_by_default is expected


@pytest.mark.unit
class TestConsoleAdapter:
    def test_bind_carries_context(self):
        logger = ConsoleAdapter(use_json=True, level="DEBUG")

        with capture_logs() as logs:
            logger.bind(request_name="CreateCustomer").info("request_started")

        assert logs == [
            {
                "event": "request_started",
                "log_level": "info",
                "request_name": "CreateCustomer",
            }
        ]

    def test_error_attaches_exception_details(self):
        logger = ConsoleAdapter(use_json=True, level="DEBUG")
        boom = RuntimeError("boom")

        with capture_logs() as logs:
            logger.error("unhandled_exception", error=boom, trace_id="t-1")

        entry = logs[0]
        assert entry["error_type"] == "RuntimeError"
        assert entry["error_message"] == "boom"
        assert entry["exc_info"] is boom
        assert entry["trace_id"] == "t-1"

    def test_with_context_is_bind(self):
        logger = ConsoleAdapter(use_json=True).with_context(customer_id="c-1")

        assert isinstance(logger, ConsoleAdapter)
