"""Structured audit logger for student-record operations.

Provides a thin wrapper around Python's :mod:`logging` module that emits
JSON-structured log records.  Every registry operation carries a
``correlation_id`` so that the result shown to the user can be matched to
its log line:

    command → registry lookup → record mutation → result

Usage::

    from student_records.audit_logger import get_audit_logger

    logger = get_audit_logger()
    logger.log_event("tuition_paid", correlation_id="abc", student_id="00001")
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

_LOGGER_NAME = "student_records.audit"


class _JsonFormatter(logging.Formatter):
    """Emit each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra = getattr(record, "_structured", None)
        if extra:
            payload.update(extra)
        return json.dumps(payload, default=str)


def get_audit_logger(name: str = _LOGGER_NAME) -> "AuditLogger":
    """Return a new :class:`AuditLogger` wrapper for the logger *name*.

    Every call builds a fresh wrapper, but wrappers sharing a *name* share
    the same :class:`logging.Logger` and its single JSON handler.
    """
    return AuditLogger(name)


class AuditLogger:
    """Structured logger for student-record audit events.

    Parameters
    ----------
    name : str
        Logger name (passed to :func:`logging.getLogger`).
    """

    def __init__(self, name: str = _LOGGER_NAME) -> None:
        self._logger = logging.getLogger(name)
        # Attach JSON handler only once per logger name.
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(_JsonFormatter())
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)

    def set_level(self, level: Union[int, str]) -> None:
        """Set the minimum level emitted by the underlying logger."""
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                raise ValueError(f"Unknown log level: {level}")
        self._logger.setLevel(level)

    def log_event(
        self,
        event: str,
        *,
        correlation_id: Optional[str] = None,
        level: int = logging.INFO,
        **fields: Any,
    ) -> Dict[str, Any]:
        """Emit a structured audit log entry and return the payload dict.

        Parameters
        ----------
        event : str
            Short event name (e.g. ``"course_enrolled"``).
        correlation_id : str, optional
            Identifier of the registry operation that produced the event.
        level : int
            Python logging level (default ``INFO``).
        **fields
            Arbitrary key-value pairs included in the JSON payload.
        """
        structured: Dict[str, Any] = {"event": event}
        if correlation_id is not None:
            structured["correlation_id"] = correlation_id
        structured.update(fields)

        if not self._logger.isEnabledFor(level):
            return structured

        record = self._logger.makeRecord(
            self._logger.name,
            level,
            "(audit)",
            0,
            event,
            (),
            None,
        )
        record._structured = structured  # type: ignore[attr-defined]
        self._logger.handle(record)
        return structured
