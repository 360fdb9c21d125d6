"""Unit tests for Logfire setup helpers."""

from types import SimpleNamespace

from alumni.config import ObservabilitySettings
from alumni.util.observability import request_attributes, should_send_to_logfire


class TestShouldSendToLogfire:
    """Tests for should_send_to_logfire."""

    def test_console_only_without_token(self):
        assert should_send_to_logfire(ObservabilitySettings()) is False

    def test_sends_when_token_present(self):
        assert should_send_to_logfire(ObservabilitySettings(logfire_token="t")) is True

    def test_explicit_setting_wins(self):
        settings = ObservabilitySettings(logfire_token="t", send_to_logfire=False)

        assert should_send_to_logfire(settings) is False


class TestRequestAttributes:
    """Tests for request_attributes."""

    def test_records_request_without_token_value(self):
        request = SimpleNamespace(
            method="POST",
            url=SimpleNamespace(path="/posts"),
            client=SimpleNamespace(host="10.0.0.1"),
            cookies={"auth_token": "secret-token"},
        )

        result = request_attributes(request, {"existing": 1})

        assert result == {
            "existing": 1,
            "method": "POST",
            "path": "/posts",
            "client_host": "10.0.0.1",
            "has_session": True,
        }

    def test_anonymous_request_without_client(self):
        request = SimpleNamespace(
            method="GET", url=SimpleNamespace(path="/health"), client=None
        )

        result = request_attributes(request, {})

        assert result["has_session"] is False
        assert "client_host" not in result
