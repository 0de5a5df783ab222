"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

from transport_core.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    LoggerNotInstalledError,
    LoggerPanicError,
    RecordDecodeError,
    SerializationError,
)
from transport_core.config import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]
        assert isinstance(err.__cause__, ValueError)

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed == {"code": "oops", "message": "oops", "detail": {"x": 1}}


class TestHierarchy:
    def test_application_errors(self) -> None:
        assert issubclass(LoggerPanicError, ApplicationError)
        assert issubclass(LoggerNotInstalledError, ApplicationError)
        assert issubclass(ConfigError, ApplicationError)

    def test_record_decode_error(self) -> None:
        err = RecordDecodeError(4, "bad json")
        assert isinstance(err, SerializationError)
        assert isinstance(err, InfrastructureError)
        assert err.code == "record_decode_error"
        assert err.detail == {"line": 4}
        assert err.payload_type == "LogRecord"
        assert "line 4" in err.message

    def test_logger_not_installed_defaults(self) -> None:
        err = LoggerNotInstalledError()
        assert err.key == "logger"
        assert "RequestLoggingMiddleware" in err.message

    def test_invalid_setting_value(self) -> None:
        err = InvalidSettingValueError("level", "loud", "unknown")
        assert err.setting_name == "level"
        assert err.code == "invalid_setting_value"
        assert err.detail == {"setting": "level", "reason": "unknown"}
        assert err.message == "level='loud' rejected: unknown"

    def test_missing_required_setting(self) -> None:
        err = MissingRequiredSettingError("LOG_TRANSPORT_CODE")
        assert err.code == "missing_required_setting"
        assert err.detail == {"setting": "LOG_TRANSPORT_CODE"}
        assert "LOG_TRANSPORT_CODE is not set" in err.message
        assert json.loads(str(err))["detail"]["setting"] == "LOG_TRANSPORT_CODE"
