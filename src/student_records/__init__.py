"""student-records: in-memory student enrollment and tuition tracking."""

from .audit_logger import AuditLogger, get_audit_logger
from .commands import Command, CommandType, dispatch, parse_command, run_script
from .config import RegistryConfig
from .exceptions import (
    CommandError,
    CommandSyntaxError,
    InvalidAmountError,
    NonPositiveAmountError,
    OverpaymentError,
    StudentNotFoundError,
    StudentRecordsError,
    UnknownCommandError,
)
from .models import OperationResult, StudentRecord
from .registry import SequentialIdGenerator, StudentRegistry

__version__ = "0.1.0"
__all__ = [
    "AuditLogger",
    "Command",
    "CommandError",
    "CommandSyntaxError",
    "CommandType",
    "InvalidAmountError",
    "NonPositiveAmountError",
    "OperationResult",
    "OverpaymentError",
    "RegistryConfig",
    "SequentialIdGenerator",
    "StudentNotFoundError",
    "StudentRecord",
    "StudentRecordsError",
    "StudentRegistry",
    "UnknownCommandError",
    "dispatch",
    "get_audit_logger",
    "parse_command",
    "run_script",
]
