"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding
- Credential redaction processor

Architecture:
- Unit tests with mocked structlog
- Redaction processor tested directly
"""

from unittest.mock import MagicMock, patch

import pytest

from storefront.infrastructure.logging.console_adapter import (
    REDACTED,
    ConsoleAdapter,
    redact_sensitive_fields,
)

STRUCTLOG = "storefront.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("method", ["debug", "info", "warning", "error", "critical"])
    def test_logs_message_with_context(self, method):
        """Test every level forwards message and context to structlog."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, method)("login_attempted", user_id="123")

            getattr(mock_logger, method).assert_called_once_with(
                "login_attempted", user_id="123"
            )

    def test_error_adds_exception_details(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("store_failure", error=ConnectionError("refused"), attempt=2)

            mock_logger.error.assert_called_once_with(
                "store_failure",
                attempt=2,
                error_type="ConnectionError",
                error_message="refused",
            )

    def test_critical_adds_exception_details(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("startup_failed", error=RuntimeError("no key"))

            mock_logger.critical.assert_called_once_with(
                "startup_failed", error_type="RuntimeError", error_message="no key"
            )

    def test_json_renderer_selected(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_selected_by_default(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)


@pytest.mark.unit
class TestConsoleAdapterBinding:
    def test_bind_returns_new_adapter_with_context(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(app="Storefront")
            bound.info("application_started")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(app="Storefront")
            bound_logger.info.assert_called_once_with("application_started")
            mock_logger.info.assert_not_called()


@pytest.mark.unit
class TestRedactSensitiveFields:
    def test_credential_keys_redacted(self):
        event = {
            "event": "login_attempted",
            "password": "SecurePass123!",
            "refresh_token": "eyJ...",
            "JWT_SECRET": "s3cret",
            "Authorization": "Bearer eyJ...",
            "email": "user@example.com",
        }

        result = redact_sensitive_fields(None, "info", event)

        assert result == {
            "event": "login_attempted",
            "password": REDACTED,
            "refresh_token": REDACTED,
            "JWT_SECRET": REDACTED,
            "Authorization": REDACTED,
            "email": "user@example.com",
        }

    def test_event_name_never_redacted(self):
        result = redact_sensitive_fields(None, "info", {"event": "token_refreshed"})

        assert result == {"event": "token_refreshed"}
