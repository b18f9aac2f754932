"""Unit tests for the logging setup."""

import json
import logging

from admissions.core.logging import (
    HANDLER_NAME,
    AdmissionsJsonFormatter,
    RequestContextFilter,
    request_id_ctx,
    setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "admissions.services.admission_workflow", logging.ERROR, __file__, 1,
        "Student insert failed", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_filter_stamps_current_request_id():
    token = request_id_ctx.set("req-42")
    try:
        record = _record()
        assert RequestContextFilter().filter(record) is True
    finally:
        request_id_ctx.reset(token)
    assert record.request_id == "req-42"


def test_filter_keeps_explicit_request_id():
    token = request_id_ctx.set("req-42")
    try:
        record = _record(request_id="from-handler")
        RequestContextFilter().filter(record)
    finally:
        request_id_ctx.reset(token)
    assert record.request_id == "from-handler"


def test_json_formatter_carries_event_fields():
    record = _record(event="enrollment_number_released", enrollment_number="2024BCA001")
    RequestContextFilter().filter(record)

    payload = json.loads(AdmissionsJsonFormatter("%(name)s %(message)s").format(record))

    assert payload["level"] == "ERROR"
    assert payload["event"] == "enrollment_number_released"
    assert payload["enrollment_number"] == "2024BCA001"
    assert "service" in payload
    # Outside a request there is no ID to report
    assert "request_id" not in payload


def test_setup_logging_does_not_stack_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        setup_logging()
        setup_logging()
        ours = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
        assert len(ours) == 1
    finally:
        root.handlers[:] = before
        root.setLevel(level)
