"""异常体系单元测试"""

from seabird.exceptions import CallError, ConfigError, SeabirdConnectionError, SeabirdError


class TestExceptions:
    def test_config_error_not_recoverable(self):
        error = ConfigError("bad url", step="url")
        assert isinstance(error, SeabirdError)
        assert error.recoverable is False
        assert error.step == "url"

    def test_connection_error_is_builtin_connection_error(self):
        original = OSError("refused")
        error = SeabirdConnectionError("localhost:1", original)
        assert isinstance(error, ConnectionError)
        assert isinstance(error, SeabirdError)
        assert error.recoverable is True
        assert "localhost:1" in str(error)
        assert error.original_error is original

    def test_call_error_message(self):
        error = CallError("/seabird.Seabird/SendMessage", "UNAVAILABLE", "down")
        assert str(error) == "/seabird.Seabird/SendMessage failed: UNAVAILABLE down"
        assert error.code == "UNAVAILABLE"
        assert error.original_error is None

    def test_call_error_without_details(self):
        error = CallError("/seabird.Seabird/SendMessage", "INTERNAL", "")
        assert str(error) == "/seabird.Seabird/SendMessage failed: INTERNAL"
