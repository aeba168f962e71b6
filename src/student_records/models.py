"""Data models for student records."""

from dataclasses import asdict, dataclass, field
from decimal import Decimal, Inexact, InvalidOperation, localcontext
from typing import Any, Dict, List, Optional, Union

from .exceptions import InvalidAmountError, NonPositiveAmountError, OverpaymentError

Amount = Union[int, float, str, Decimal]

DEFAULT_COURSE_COST = Decimal(500)


def coerce_amount(value: Amount) -> Decimal:
    """Convert *value* to a finite :class:`Decimal`.

    Integral values are normalized so that ``"1e2"`` and ``100.0`` both
    become ``Decimal("100")``.  Raises :class:`InvalidAmountError` for
    anything that is not a finite number.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as e:
        raise InvalidAmountError(value) from e
    if not amount.is_finite():
        raise InvalidAmountError(value)
    if amount == amount.to_integral_value():
        try:
            return amount.quantize(Decimal(1))
        except InvalidOperation:
            # more digits than the context precision allows
            return amount
    return amount


@dataclass
class StudentRecord:
    """One student's identity, enrolled courses and tuition balance.

    ``student_id`` and ``name`` are fixed at creation.  ``courses`` only
    grows and ``balance`` never drops below zero; both change only through
    :meth:`enroll` and :meth:`pay_tuition`.
    """

    student_id: str
    name: str
    course_cost: Decimal = DEFAULT_COURSE_COST
    currency_symbol: str = "$"
    courses: List[str] = field(default_factory=list)
    balance: Decimal = field(default_factory=Decimal)

    def _money(self, value: Decimal) -> str:
        return f"{self.currency_symbol}{format(value, 'f')}"

    def enroll(self, course: str) -> str:
        """Add *course* and charge the course cost. Returns a confirmation."""
        self.courses.append(course)
        self.balance += self.course_cost
        return f"{self.name} has been enrolled in {course}"

    def view_balance(self) -> str:
        return (
            f"The balance for {self.name} (ID: {self.student_id}) "
            f"is {self._money(self.balance)}"
        )

    def pay_tuition(self, amount: Amount) -> str:
        """Reduce the balance by *amount*.

        Raises :class:`NonPositiveAmountError` when *amount* is zero or
        negative, :class:`OverpaymentError` when it exceeds the balance and
        :class:`InvalidAmountError` when the new balance cannot be
        represented exactly.  The balance is untouched in all three cases.
        """
        value = coerce_amount(amount)
        if value <= 0:
            raise NonPositiveAmountError(value)
        if value > self.balance:
            raise OverpaymentError(value, self.balance, self.currency_symbol)
        with localcontext() as ctx:
            ctx.traps[Inexact] = True
            try:
                new_balance = self.balance - value
            except Inexact as e:
                raise InvalidAmountError(
                    value, "Payment amount has more precision than the balance can hold."
                ) from e
        self.balance = new_balance
        return (
            f"{self.name} has paid {self._money(value)}. "
            f"Current balance is {self._money(self.balance)}"
        )

    def show_status(self) -> str:
        return "\n".join(
            [
                f"Student Name: {self.name}",
                f"Student ID: {self.student_id}",
                f"Courses Enrolled: {', '.join(self.courses)}",
                f"Tuition Balance: {self._money(self.balance)}",
            ]
        )

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["balance"] = str(self.balance)
        d["course_cost"] = str(self.course_cost)
        return d


@dataclass
class OperationResult:
    """Outcome of a single registry operation.

    Parameters
    ----------
    ok : bool
        Whether the operation took effect (or, for reads, succeeded).
    code : str
        Machine-readable outcome, e.g. ``"course_enrolled"`` or an error
        code such as ``"STUDENT_NOT_FOUND"``.
    message : str
        User-facing text describing the outcome.
    correlation_id : str
        Identifier shared with the audit log entry for this operation.
    student_id : str, optional
        ID of the student the operation targeted.
    data : dict
        Operation-specific payload (e.g. ``{"balance": "500"}``).
    """

    ok: bool
    code: str
    message: str
    correlation_id: str = ""
    student_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
