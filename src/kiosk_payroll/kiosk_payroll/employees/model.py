from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import (
    BREAK_TRIGGER_HOURS,
    DEFAULT_BREAK_DEDUCTION_MINUTES,
    DEFAULT_EMPLOYEE_NAME,
    DEFAULT_MAX_DAILY_HOURS,
    WEEKLY_REGULAR_CAP_HOURS,
)


@dataclass(frozen=True)
class EmployeePolicy:
    """Domain entity: the payroll settings stored on an employee record.

    Note: break_trigger_hours and weekly_regular_cap_hours are fixed company
    constants; only the daily limit and break length vary per employee.
    """

    employee_id: str
    name: str = DEFAULT_EMPLOYEE_NAME
    max_daily_hours: float = DEFAULT_MAX_DAILY_HOURS
    break_deduction_minutes: float = DEFAULT_BREAK_DEDUCTION_MINUTES
    break_trigger_hours: float = BREAK_TRIGGER_HOURS
    weekly_regular_cap_hours: float = WEEKLY_REGULAR_CAP_HOURS

    @property
    def break_deduction_hours(self) -> float:
        return self.break_deduction_minutes / 60.0
