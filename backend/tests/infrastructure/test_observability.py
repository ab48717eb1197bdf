"""Structured Logging — JSON and text formatter fields, idempotent setup."""

import json
import logging

from ogiri.infrastructure.observability import (
    JSONFormatter,
    TextFormatter,
    setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "ogiri.test", logging.INFO, __file__, 1, "hello %s", ("お題",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "ogiri.test"
    assert log["message"] == "hello お題"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras():
    log = json.loads(JSONFormatter().format(
        _record(theme_id="theme_1", error_code="RESOURCE_NOT_FOUND", unrelated="x"),
    ))
    assert log["theme_id"] == "theme_1"
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert "unrelated" not in log


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")
    ours = [h for h in logging.root.handlers if h.get_name() == "ogiri"]
    assert len(ours) == 1
    assert isinstance(ours[0].formatter, JSONFormatter)
    assert logging.root.level == logging.INFO


def test_text_formatter_appends_extras():
    line = TextFormatter().format(
        _record(theme_id="theme_1", answer_id="answer_2", unrelated="x"),
    )
    assert line.endswith("hello お題 [theme_id=theme_1 answer_id=answer_2]")
    assert "unrelated" not in line


def test_text_formatter_without_extras_is_plain():
    line = TextFormatter().format(_record())
    assert line.endswith("ogiri.test: hello お題")


def test_setup_logging_text_uses_text_formatter():
    setup_logging("INFO", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == "ogiri"]
    assert isinstance(ours[0].formatter, TextFormatter)
