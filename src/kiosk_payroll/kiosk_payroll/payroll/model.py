from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.constants import HOURS_TOLERANCE
from ..punches.model import PunchEvent


@dataclass(frozen=True)
class Shift:
    """A paired shift with its full hour breakdown.

    regular_portion is the daily-capped regular time before the weekly pass;
    regular_hours is what remains regular after weekly overtime is allocated.
    """

    employee_id: str
    clock_in: PunchEvent
    clock_out: PunchEvent
    gross_hours: float
    break_deduction_minutes: float
    break_deduction_hours: float
    net_hours: float
    regular_portion: float
    regular_hours: float
    daily_overtime_hours: float
    weekly_overtime_hours: float = 0.0

    @property
    def is_negative_duration(self) -> bool:
        return self.clock_out.timestamp < self.clock_in.timestamp

    @property
    def break_deducted(self) -> bool:
        return self.break_deduction_hours > 0

    def is_balanced(self, tolerance: float = HOURS_TOLERANCE) -> bool:
        allocated = self.regular_hours + self.daily_overtime_hours + self.weekly_overtime_hours
        return abs(allocated - self.net_hours) <= tolerance


@dataclass
class WeeklyBucket:
    """Running regular-hour demand for one employee in one Monday-based week."""

    employee_id: str
    week_start: datetime
    cumulative_regular: float = 0.0
