"""Configuration for the student registry."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional

ENV_COURSE_COST = "STUDENT_RECORDS_COURSE_COST"
ENV_ID_WIDTH = "STUDENT_RECORDS_ID_WIDTH"
ENV_LOG_LEVEL = "STUDENT_RECORDS_LOG_LEVEL"


@dataclass
class RegistryConfig:
    """Configuration knobs for a :class:`~student_records.registry.StudentRegistry`.

    Parameters
    ----------
    course_cost : Decimal
        Amount added to a student's balance for every enrollment.
    id_width : int
        Number of digits student IDs are zero-padded to.
    currency_symbol : str
        Prefix used when amounts are rendered in messages.
    log_level : str
        Level name applied to the audit logger by the CLI.
    """

    course_cost: Decimal = Decimal(500)
    id_width: int = 5
    currency_symbol: str = "$"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        try:
            self.course_cost = Decimal(str(self.course_cost).strip())
        except InvalidOperation:
            raise ValueError(f"course_cost is not a number: {self.course_cost!r}") from None
        if not self.course_cost.is_finite():
            raise ValueError(f"course_cost must be finite: {self.course_cost}")
        if self.course_cost < 0:
            raise ValueError(f"course_cost must not be negative: {self.course_cost}")
        if self.id_width < 1:
            raise ValueError(f"id_width must be at least 1: {self.id_width}")
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RegistryConfig":
        """Build a config from ``STUDENT_RECORDS_*`` environment variables.

        Unset variables fall back to the dataclass defaults.  Malformed
        values raise :class:`ValueError`.
        """
        env = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}
        if env.get(ENV_COURSE_COST):
            kwargs["course_cost"] = env[ENV_COURSE_COST]
        if env.get(ENV_ID_WIDTH):
            kwargs["id_width"] = int(env[ENV_ID_WIDTH])
        if env.get(ENV_LOG_LEVEL):
            kwargs["log_level"] = env[ENV_LOG_LEVEL]
        return cls(**kwargs)
