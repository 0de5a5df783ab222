"""Unit tests for log formatters, levels, field helpers and redaction."""

from __future__ import annotations

import dataclasses
import io
import json
import logging
from typing import Any
from uuid import uuid4

import pytest

from transport_core.observability.logging import (
    NOTICE,
    DefaultLogFormatter,
    JsonRecordFormatter,
    Level,
    SensitiveFieldsFilter,
    body_value,
    new_logger,
)
from transport_core.observability.logging.fields import TRUNCATED_SUFFIX
from transport_core.testing import JSONRecordScanner


def json_logger() -> tuple[Any, io.StringIO]:
    sink = io.StringIO()
    return new_logger(f"test.{uuid4().hex}", Level.DEBUG, JsonRecordFormatter(), sink), sink


# ---------------------------------------------------------------------------
# Levels
# ---------------------------------------------------------------------------


class TestLevel:
    def test_notice_sits_between_info_and_warning(self) -> None:
        assert logging.INFO < NOTICE < logging.WARNING
        assert logging.getLevelName(NOTICE) == "NOTICE"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("debug", Level.DEBUG),
            ("INFO", Level.INFO),
            ("notice", Level.NOTICE),
            ("warn", Level.WARNING),
            (" error ", Level.ERROR),
            (50, Level.CRITICAL),
        ],
    )
    def test_parse(self, raw: int | str, expected: Level) -> None:
        assert Level.parse(raw) is expected

    def test_parse_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            Level.parse("verbose")

    def test_codes_are_four_characters(self) -> None:
        assert [lvl.code for lvl in Level] == ["CRIT", "ERRO", "WARN", "NOTI", "INFO", "DEBU"]


# ---------------------------------------------------------------------------
# DefaultLogFormatter
# ---------------------------------------------------------------------------


class TestDefaultLogFormatter:
    def _record(self, level: int, msg: str) -> logging.LogRecord:
        record = logging.LogRecord("x", level, __file__, 1, msg, (), None)
        record.created = 1_700_000_000.1234
        record.msecs = 123.4
        return record

    def test_millisecond_precision_and_arrow(self) -> None:
        line = DefaultLogFormatter().format(self._record(logging.ERROR, "broken"))
        date, time, code, arrow, message = line.split(" ", 4)
        assert time.endswith(".123")
        assert code == "ERRO"
        assert arrow == "=>"
        assert message == "broken"

    def test_notice_renders_as_noti(self) -> None:
        line = DefaultLogFormatter().format(self._record(NOTICE, "heads up"))
        assert " NOTI => heads up" in line


# ---------------------------------------------------------------------------
# JsonRecordFormatter
# ---------------------------------------------------------------------------


class TestJsonRecordFormatter:
    def test_round_trip_level_and_message(self) -> None:
        log, sink = json_logger()
        log.noticef("queue %s drained", "q1")
        records, err = JSONRecordScanner(sink.getvalue().splitlines()).scan_all()
        assert err is None
        assert len(records) == 1
        assert records[0].level_name == "NOTICE"
        assert records[0].message == "queue q1 drained"
        assert records[0].datetime is not None
        assert records[0].datetime.tzinfo is not None

    def test_tags_are_lifted_out_of_context(self) -> None:
        log, sink = json_logger()
        log.info("hello", handler="GIN", connection=12, account="acc", extra="value")
        payload = json.loads(sink.getvalue())
        assert payload["handler"] == "GIN"
        assert payload["connection"] == "12"
        assert payload["account"] == "acc"
        assert payload["context"] == {"extra": "value"}

    def test_no_fields_means_no_context_key(self) -> None:
        log, sink = json_logger()
        log.error("plain")
        payload = json.loads(sink.getvalue())
        assert set(payload) == {"level_name", "datetime", "caller", "message"}

    def test_one_object_per_line(self) -> None:
        log, sink = json_logger()
        log.info("multi\nline")
        log.info("second")
        raw_lines = sink.getvalue().splitlines()
        assert len(raw_lines) == 2
        assert json.loads(raw_lines[0])["message"] == "multi\nline"


# ---------------------------------------------------------------------------
# body_value
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class Payload:
    chat_id: int
    token: str


class TestBodyValue:
    def test_none_stays_none(self) -> None:
        assert body_value(None) is None

    def test_plain_string_kept(self) -> None:
        assert body_value("hello") == "hello"

    def test_json_bytes_are_decoded(self) -> None:
        assert body_value(b'{"id": 1, "tags": ["a"]}') == {"id": 1, "tags": ["a"]}

    def test_invalid_utf8_is_replaced(self) -> None:
        assert body_value(b"ok\xff") == "ok�"

    def test_sensitive_keys_are_redacted(self) -> None:
        result = body_value('{"token": "s3cr3t", "items": [{"password": "p", "n": 1}]}')
        assert result["token"] == SensitiveFieldsFilter.REDACTED
        assert result["items"][0]["password"] == SensitiveFieldsFilter.REDACTED
        assert result["items"][0]["n"] == 1

    def test_dataclass_becomes_redacted_mapping(self) -> None:
        assert body_value(Payload(chat_id=5, token="t")) == {
            "chat_id": 5,
            "token": SensitiveFieldsFilter.REDACTED,
        }

    def test_long_string_is_truncated(self) -> None:
        result = body_value("x" * 50, max_length=10)
        assert result == "x" * 10 + TRUNCATED_SUFFIX

    def test_large_document_is_truncated_after_redaction(self) -> None:
        result = body_value({"token": "secret", "data": "y" * 100}, max_length=40)
        assert isinstance(result, str)
        assert result.endswith(TRUNCATED_SUFFIX)
        assert "secret" not in result

    def test_zero_max_length_disables_limit(self) -> None:
        assert body_value("z" * 10_000, max_length=0) == "z" * 10_000

    def test_numbers_pass_through(self) -> None:
        assert body_value(42) == 42
        assert body_value(True) is True


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"password": "s3cr3t", "name": "alice"})
        assert result["password"] == SensitiveFieldsFilter.REDACTED
        assert result["name"] == "alice"

    def test_case_insensitive_key_matching(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"PASSWORD": "p", "Token": "t", "normal": "ok"})
        assert result["PASSWORD"] == SensitiveFieldsFilter.REDACTED
        assert result["Token"] == SensitiveFieldsFilter.REDACTED
        assert result["normal"] == "ok"

    def test_custom_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter(sensitive_fields=frozenset({"secret_key"}))
        result = f.redact({"secret_key": "abc", "password": "keep"})
        assert result["secret_key"] == SensitiveFieldsFilter.REDACTED
        assert result["password"] == "keep"

    def test_redact_deep_walks_lists(self) -> None:
        f = SensitiveFieldsFilter()
        data: dict[str, Any] = {"outer": [{"api_key": "k"}, "plain"]}
        assert f.redact_deep(data) == {"outer": [{"api_key": SensitiveFieldsFilter.REDACTED}, "plain"]}

    def test_redact_does_not_modify_original(self) -> None:
        f = SensitiveFieldsFilter()
        original = {"password": "secret", "nested": {"token": "t"}}
        f.redact_deep(original)
        assert original == {"password": "secret", "nested": {"token": "t"}}
