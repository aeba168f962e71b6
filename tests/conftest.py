import logging

import pytest

from student_records.audit_logger import get_audit_logger


@pytest.fixture(autouse=True)
def _audit_log_level():
    """The CLI lowers the shared audit logger's level; restore it per test."""
    logger = get_audit_logger()
    logger.set_level(logging.DEBUG)
    yield
    logger.set_level(logging.DEBUG)
