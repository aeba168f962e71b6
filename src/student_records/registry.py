"""StudentRegistry: owns student records and dispatches id-scoped operations."""

from __future__ import annotations

import logging
import uuid
from typing import Callable, List, Optional

from .audit_logger import get_audit_logger
from .config import RegistryConfig
from .exceptions import InvalidAmountError, StudentNotFoundError, StudentRecordsError
from .models import Amount, OperationResult, StudentRecord

_log = get_audit_logger()


class SequentialIdGenerator:
    """Hands out ``00001``, ``00002``, ... zero-padded to *width* digits.

    Each generator keeps its own counter, so separate registries never
    share or skip IDs.
    """

    def __init__(self, width: int = 5, start: int = 0) -> None:
        self._width = width
        self._counter = start

    def __call__(self) -> str:
        self._counter += 1
        return str(self._counter).zfill(self._width)

    @property
    def last_issued(self) -> int:
        return self._counter


class StudentRegistry:
    """Ordered, in-memory collection of :class:`StudentRecord`.

    Every public operation returns an :class:`OperationResult`; typed
    :class:`StudentRecordsError` failures are reported in the result and
    never raised to the caller.

    Parameters
    ----------
    config : RegistryConfig, optional
        Course cost, ID width and currency symbol.
    id_generator : callable, optional
        ``f() -> str`` returning the next unique student ID.  Defaults to a
        :class:`SequentialIdGenerator` using ``config.id_width``.
    """

    def __init__(
        self,
        config: Optional[RegistryConfig] = None,
        id_generator: Optional[Callable[[], str]] = None,
    ) -> None:
        self._config = config or RegistryConfig()
        self._next_id = id_generator or SequentialIdGenerator(self._config.id_width)
        self._records: List[StudentRecord] = []

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_by_id(self, student_id: str) -> Optional[StudentRecord]:
        """Return the record for *student_id*, or None if there is none."""
        for record in self._records:
            if record.student_id == student_id:
                return record
        return None

    def _require(self, student_id: str) -> StudentRecord:
        record = self.find_by_id(student_id)
        if record is None:
            raise StudentNotFoundError(student_id)
        return record

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add_student(self, name: str) -> OperationResult:
        """Create a record for *name* and return its new ID in the result."""
        correlation_id = uuid.uuid4().hex
        student_id = self._next_id()
        if self.find_by_id(student_id) is not None:
            raise RuntimeError(f"id generator returned a duplicate ID: {student_id}")

        record = StudentRecord(
            student_id=student_id,
            name=name,
            course_cost=self._config.course_cost,
            currency_symbol=self._config.currency_symbol,
        )
        self._records.append(record)

        _log.log_event(
            "student_added",
            correlation_id=correlation_id,
            student_id=student_id,
            name=name,
        )
        return OperationResult(
            ok=True,
            code="student_added",
            message=f"Student {name} with ID {student_id} has been added.",
            correlation_id=correlation_id,
            student_id=student_id,
            data={"student_id": student_id},
        )

    def enroll_student(self, student_id: str, course: str) -> OperationResult:
        return self._run(
            "course_enrolled",
            student_id,
            lambda record: record.enroll(course),
            course=course,
        )

    def view_balance(self, student_id: str) -> OperationResult:
        return self._run("balance_viewed", student_id, StudentRecord.view_balance)

    def pay_tuition(self, student_id: str, amount: Amount) -> OperationResult:
        return self._run(
            "tuition_paid",
            student_id,
            lambda record: record.pay_tuition(amount),
            amount=str(amount),
        )

    def show_status(self, student_id: str) -> OperationResult:
        return self._run("status_shown", student_id, StudentRecord.show_status)

    def _run(
        self,
        event: str,
        student_id: str,
        operation: Callable[[StudentRecord], str],
        **fields: str,
    ) -> OperationResult:
        """Resolve *student_id*, apply *operation* and wrap the outcome."""
        correlation_id = uuid.uuid4().hex
        try:
            record = self._require(student_id)
            message = operation(record)
        except StudentRecordsError as e:
            if isinstance(e, StudentNotFoundError):
                failure_event = "student_not_found"
            elif isinstance(e, InvalidAmountError):
                failure_event = "payment_rejected"
            else:
                failure_event = f"{event}_failed"
            _log.log_event(
                failure_event,
                correlation_id=correlation_id,
                level=logging.WARNING,
                student_id=student_id,
                code=e.code,
                reason=str(e),
                **fields,
            )
            return OperationResult(
                ok=False,
                code=e.code,
                message=str(e),
                correlation_id=correlation_id,
                student_id=student_id,
            )

        data = {"balance": str(record.balance), "courses": list(record.courses)}
        _log.log_event(
            event,
            correlation_id=correlation_id,
            student_id=student_id,
            balance=data["balance"],
            **fields,
        )
        return OperationResult(
            ok=True,
            code=event,
            message=message,
            correlation_id=correlation_id,
            student_id=student_id,
            data=data,
        )

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------

    @property
    def records(self) -> List[StudentRecord]:
        """Return all records in insertion order."""
        return list(self._records)

    @property
    def config(self) -> RegistryConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._records)
