"""Tests for correlation ID tracking and logging helpers."""

import logging

import pytest

from study_backend.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from study_backend.observability.log_utils import log_with_context, safe_log_value
from study_backend.observability.logger import CorrelationIdFilter, configure_logging


@pytest.fixture(autouse=True)
def reset_correlation_id():
    """Keep correlation IDs from leaking between tests."""
    clear_correlation_id()
    yield
    clear_correlation_id()


class TestCorrelationId:
    """Tests for correlation ID context helpers."""

    def test_set_and_get(self) -> None:
        assert set_correlation_id("abc") == "abc"
        assert get_correlation_id() == "abc"

    def test_generates_id_when_missing(self) -> None:
        generated = set_correlation_id()
        assert generated
        assert get_correlation_id() == generated

    def test_clear(self) -> None:
        set_correlation_id("abc")
        clear_correlation_id()
        assert get_correlation_id() == ""


class TestCorrelationIdFilter:
    """Tests for correlation ID injection into log records."""

    def _record(self) -> logging.LogRecord:
        return logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)

    def test_injects_current_id(self) -> None:
        set_correlation_id("req-1")
        record = self._record()

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "req-1"

    def test_placeholder_outside_request(self) -> None:
        record = self._record()
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "-"


class TestConfigureLogging:
    """Tests for root logger configuration."""

    def test_installs_single_handler_at_level(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("debug")
            configure_logging("warning")

            assert len(root.handlers) == 1
            assert root.level == logging.WARNING
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)


class TestSafeLogValue:
    """Tests for safe_log_value."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "None"),
            ("short", "short"),
            ([1, 2, 3], "list(3 items)"),
            ((1,), "tuple(1 items)"),
            ({"a": 1}, "dict(1 keys)"),
            (42, "42"),
        ],
    )
    def test_converts_values(self, value, expected: str) -> None:
        assert safe_log_value(value) == expected

    def test_truncates_long_strings(self) -> None:
        result = safe_log_value("x" * 300, max_length=10)
        assert result == "xxxxxxxxxx... (truncated, 300 total)"

    def test_log_with_context_attaches_safe_values(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("study_backend.tests")
        with caplog.at_level(logging.INFO, logger="study_backend.tests"):
            log_with_context(logger, logging.INFO, "hello", items=[1, 2], count=7)

        record = caplog.records[-1]
        assert record.items == "list(2 items)"
        assert record.count == "7"


def test_package_exports_resolve() -> None:
    import study_backend.observability as observability

    assert sorted(observability.__all__) == [
        "configure_logging",
        "get_correlation_id",
        "set_correlation_id",
    ]
    assert all(callable(getattr(observability, name)) for name in observability.__all__)
