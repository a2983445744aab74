"""Structured Logging - JSON formatter output."""

import json
import logging

from rosati_render.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "rosati_render.test", logging.INFO, __file__, 1, "incoming_upload", None, None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_contains_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "rosati_render.test"
    assert out["message"] == "incoming_upload"
    assert "timestamp" in out


def test_json_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(mimetype="image/jpeg", upload_bytes=1024, n=2, secret="x"),
    ))
    assert out["mimetype"] == "image/jpeg"
    assert out["upload_bytes"] == 1024
    assert out["n"] == 2
    assert "secret" not in out


def test_setup_logging_twice_keeps_one_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("INFO", "json")
        setup_logging("DEBUG", "text")
        ours = [h for h in root.handlers if h not in saved_handlers]
        assert len(ours) == 1
        assert not isinstance(ours[0].formatter, JSONFormatter)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
