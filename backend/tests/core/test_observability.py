"""Structured Logging: verifies the JSON formatter output."""

import json
import logging

from roomfinder.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "roomfinder.test", logging.INFO, __file__, 1, "Room %s", ("saved",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))

    assert log["level"] == "INFO"
    assert log["logger"] == "roomfinder.test"
    assert log["message"] == "Room saved"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras():
    log = json.loads(JSONFormatter().format(_record(room_pk=4, unrelated="x")))

    assert log["room_pk"] == 4
    assert "unrelated" not in log
