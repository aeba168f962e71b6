"""Command parsing and dispatch.

Turns a discrete command (from the interactive menu or a script line) into
a call on :class:`~student_records.registry.StudentRegistry` and hands back
the :class:`~student_records.models.OperationResult` for rendering.  Nothing
in this module reads from or writes to the terminal.

Script syntax, one command per line::

    add <name>
    enroll <student_id> <course>
    balance <student_id>
    pay <student_id> <amount>
    status <student_id>
    exit

Menu numbers ``1`` to ``6`` may be used in place of the keywords.  Blank
lines and lines starting with ``#`` are ignored.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional

from .exceptions import (
    CommandError,
    CommandSyntaxError,
    InvalidAmountError,
    UnknownCommandError,
)
from .models import OperationResult, coerce_amount
from .registry import StudentRegistry


class CommandType(Enum):
    """The six menu choices, valued by their menu number."""

    ADD_STUDENT = "1"
    ENROLL = "2"
    VIEW_BALANCE = "3"
    PAY_TUITION = "4"
    SHOW_STATUS = "5"
    EXIT = "6"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: Dict[CommandType, str] = {
    CommandType.ADD_STUDENT: "Add Student",
    CommandType.ENROLL: "Enroll in Course",
    CommandType.VIEW_BALANCE: "View Balance",
    CommandType.PAY_TUITION: "Pay Tuition",
    CommandType.SHOW_STATUS: "Show Status",
    CommandType.EXIT: "Exit",
}

_KEYWORDS: Dict[str, CommandType] = {
    "add": CommandType.ADD_STUDENT,
    "enroll": CommandType.ENROLL,
    "balance": CommandType.VIEW_BALANCE,
    "pay": CommandType.PAY_TUITION,
    "status": CommandType.SHOW_STATUS,
    "exit": CommandType.EXIT,
}

_USAGE: Dict[CommandType, str] = {
    CommandType.ADD_STUDENT: "add <name>",
    CommandType.ENROLL: "enroll <student_id> <course>",
    CommandType.VIEW_BALANCE: "balance <student_id>",
    CommandType.PAY_TUITION: "pay <student_id> <amount>",
    CommandType.SHOW_STATUS: "status <student_id>",
    CommandType.EXIT: "exit",
}

EXIT_MESSAGE = "Exiting the program"


@dataclass
class Command:
    """A parsed command and its typed arguments."""

    type: CommandType
    student_id: Optional[str] = None
    name: Optional[str] = None
    course: Optional[str] = None
    amount: Optional[Decimal] = None


def resolve_command_type(token: str) -> CommandType:
    """Map a keyword (``"pay"``) or menu number (``"4"``) to a CommandType."""
    key = token.strip().lower()
    if key in _KEYWORDS:
        return _KEYWORDS[key]
    try:
        return CommandType(key)
    except ValueError:
        raise UnknownCommandError(token) from None


def parse_amount(text: str) -> Decimal:
    """Parse a payment amount, accepting only positive finite numbers."""
    amount = coerce_amount(text)
    if amount <= 0:
        raise InvalidAmountError(text)
    return amount


def parse_command(line: str) -> Command:
    """Parse one script line into a :class:`Command`.

    The name of ``add`` and the course of ``enroll`` take the remainder of
    the line, so they may contain spaces.
    """
    keyword, _, rest = line.strip().partition(" ")
    command_type = resolve_command_type(keyword)
    rest = rest.strip()

    if command_type is CommandType.EXIT:
        return Command(command_type)

    if command_type is CommandType.ADD_STUDENT:
        if not rest:
            raise CommandSyntaxError(keyword, _USAGE[command_type])
        return Command(command_type, name=rest)

    student_id, _, arg = rest.partition(" ")
    arg = arg.strip()
    if not student_id:
        raise CommandSyntaxError(keyword, _USAGE[command_type])

    if command_type is CommandType.ENROLL:
        if not arg:
            raise CommandSyntaxError(keyword, _USAGE[command_type])
        return Command(command_type, student_id=student_id, course=arg)

    if command_type is CommandType.PAY_TUITION:
        if not arg:
            raise CommandSyntaxError(keyword, _USAGE[command_type])
        return Command(command_type, student_id=student_id, amount=parse_amount(arg))

    return Command(command_type, student_id=student_id)


def dispatch(registry: StudentRegistry, command: Command) -> OperationResult:
    """Run *command* against *registry* and return the outcome."""
    t = command.type
    if t is CommandType.ADD_STUDENT:
        return registry.add_student(command.name or "")
    if t is CommandType.ENROLL:
        return registry.enroll_student(command.student_id or "", command.course or "")
    if t is CommandType.VIEW_BALANCE:
        return registry.view_balance(command.student_id or "")
    if t is CommandType.PAY_TUITION:
        amount = command.amount if command.amount is not None else Decimal(0)
        return registry.pay_tuition(command.student_id or "", amount)
    if t is CommandType.SHOW_STATUS:
        return registry.show_status(command.student_id or "")
    return OperationResult(
        ok=True,
        code="exit",
        message=EXIT_MESSAGE,
        correlation_id=uuid.uuid4().hex,
    )


def _error_result(error: CommandError | InvalidAmountError) -> OperationResult:
    return OperationResult(
        ok=False,
        code=error.code,
        message=str(error),
        correlation_id=uuid.uuid4().hex,
    )


def run_script(registry: StudentRegistry, lines: Iterable[str]) -> Iterator[OperationResult]:
    """Parse and dispatch each line, yielding one result per command.

    Lines that fail to parse yield a failed result and processing carries
    on.  Iteration stops after an ``exit`` command.
    """
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        try:
            command = parse_command(stripped)
        except (CommandError, InvalidAmountError) as e:
            yield _error_result(e)
            continue
        result = dispatch(registry, command)
        yield result
        if command.type is CommandType.EXIT:
            return
