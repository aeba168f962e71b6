"""Typed exception hierarchy for student-records.

Every error carries a machine-readable ``code`` class attribute and the
structured data needed to report it, so callers catch by type and render
``str(exc)`` for the user::

    StudentRecordsError
    +-- StudentNotFoundError
    +-- InvalidAmountError
    |   +-- NonPositiveAmountError
    |   +-- OverpaymentError
    +-- CommandError
        +-- UnknownCommandError
        +-- CommandSyntaxError
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional


class StudentRecordsError(Exception):
    """Base exception for all student-records errors."""

    code: str = "STUDENT_RECORDS_ERROR"


class StudentNotFoundError(StudentRecordsError):
    """No record matches the given student ID."""

    code: str = "STUDENT_NOT_FOUND"

    def __init__(self, student_id: str):
        self.student_id = student_id
        super().__init__(f"Student with ID {student_id} not found.")


# Payment amount errors


class InvalidAmountError(StudentRecordsError):
    """Payment amount is not a usable positive number."""

    code: str = "INVALID_AMOUNT"

    def __init__(self, amount: Any, message: Optional[str] = None):
        self.amount = amount
        super().__init__(message or "Please enter a valid positive number.")


class NonPositiveAmountError(InvalidAmountError):
    """Payment amount is zero or negative."""

    code: str = "NON_POSITIVE_AMOUNT"

    def __init__(self, amount: Any):
        super().__init__(amount, "Payment amount must be positive.")


class OverpaymentError(InvalidAmountError):
    """Payment amount exceeds the outstanding balance."""

    code: str = "OVERPAYMENT"

    def __init__(self, amount: Any, balance: Decimal, currency_symbol: str = "$"):
        self.balance = balance
        super().__init__(
            amount,
            f"Cannot pay more than the current balance of {currency_symbol}{format(balance, 'f')}",
        )


# Command parsing errors


class CommandError(StudentRecordsError):
    """Base exception for command parsing errors."""

    code: str = "COMMAND_ERROR"


class UnknownCommandError(CommandError):
    """Command keyword or menu number is not recognised."""

    code: str = "UNKNOWN_COMMAND"

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__("Invalid choice. Please select again.")


class CommandSyntaxError(CommandError):
    """Command is missing required arguments."""

    code: str = "COMMAND_SYNTAX"

    def __init__(self, keyword: str, usage: str):
        self.keyword = keyword
        self.usage = usage
        super().__init__(f"Usage: {usage}")
