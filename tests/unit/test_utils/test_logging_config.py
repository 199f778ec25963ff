import json
import logging

from utils.logging_config import JSONFormatter, PrettyJSONFormatter, generate_request_id


def make_record(**extra):
    record = logging.LogRecord("features.booking.service", logging.INFO, __file__, 1, "Booking created", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    line = JSONFormatter().format(make_record(booking_id="b-1", status="pending"))
    payload = json.loads(line)

    assert payload["level"] == "INFO"
    assert payload["logger"] == "features.booking.service"
    assert payload["message"] == "Booking created"
    assert payload["booking_id"] == "b-1"
    assert payload["status"] == "pending"


def test_pretty_formatter_shows_request_context():
    line = PrettyJSONFormatter().format(
        make_record(request_id="abc12345", method="GET", path="/health", status_code=200, duration_ms=1.5)
    )

    assert "req_id=abc12345" in line
    assert "GET /health" in line
    assert "status=200" in line


def test_generate_request_id():
    assert len(generate_request_id()) == 8
