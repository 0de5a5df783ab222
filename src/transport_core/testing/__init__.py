"""Testing – helpers for asserting on emitted log lines."""
from transport_core.testing.log_records import JSONRecordScanner, LogRecord

__all__ = ["JSONRecordScanner", "LogRecord"]
