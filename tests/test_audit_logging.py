"""Unit tests for the structured audit logger."""

import json
import logging

import pytest

from student_records.audit_logger import AuditLogger, get_audit_logger


def test_audit_logger_emits_json(capfd):
    """AuditLogger.log_event() emits a JSON line to stderr."""
    logger = AuditLogger("test.audit.json")
    logger.log_event("course_enrolled", correlation_id="cid-1", student_id="00001")
    captured = capfd.readouterr()
    payload = json.loads(captured.err.strip())
    assert payload["event"] == "course_enrolled"
    assert payload["correlation_id"] == "cid-1"
    assert payload["student_id"] == "00001"
    assert payload["level"] == "INFO"
    assert "timestamp" in payload


def test_audit_logger_returns_payload():
    """log_event returns the structured payload dict."""
    logger = AuditLogger("test.audit.returns")
    result = logger.log_event("ev", correlation_id="c1", foo="bar")
    assert result == {"event": "ev", "correlation_id": "c1", "foo": "bar"}


def test_audit_logger_omits_missing_correlation_id():
    logger = AuditLogger("test.audit.nocid")
    assert "correlation_id" not in logger.log_event("ev")


def test_set_level_filters_events(capfd):
    logger = AuditLogger("test.audit.level")
    logger.set_level("warning")
    logger.log_event("quiet", level=logging.INFO)
    logger.log_event("loud", level=logging.WARNING)
    lines = capfd.readouterr().err.strip().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["event"] == "loud"


def test_set_level_unknown_name():
    with pytest.raises(ValueError):
        AuditLogger("test.audit.badlevel").set_level("chatty")


def test_handler_attached_once():
    AuditLogger("test.audit.once")
    AuditLogger("test.audit.once")
    assert len(logging.getLogger("test.audit.once").handlers) == 1


def test_get_audit_logger_returns_instance():
    assert isinstance(get_audit_logger(), AuditLogger)
