"""
Tests for correlation ID propagation and log formatting.
"""

import logging

from backend.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from backend.observability.logger import CorrelationIdFilter


def test_set_correlation_id_generates_when_missing():
    value = set_correlation_id()
    try:
        assert value
        assert get_correlation_id() == value
    finally:
        clear_correlation_id()


def test_set_correlation_id_keeps_given_value():
    assert set_correlation_id("req-1") == "req-1"
    clear_correlation_id()
    assert get_correlation_id() == ""


def test_filter_stamps_record_with_current_id():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
    set_correlation_id("req-7")
    try:
        assert CorrelationIdFilter().filter(record) is True
    finally:
        clear_correlation_id()

    assert record.correlation_id == "req-7"


def test_filter_uses_placeholder_outside_requests():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

    CorrelationIdFilter().filter(record)

    assert record.correlation_id == "-"
