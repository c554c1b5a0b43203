from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Sequence

from ..core.constants import DATE_FORMAT, HOURS_DECIMALS, TIME_FORMAT, TIMESTAMP_FORMAT
from ..employees.model import EmployeePolicy
from ..shifts.model import UnpairedPunch
from .model import Shift

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShiftRow:
    employee_name: str
    date: str
    clock_in: str
    clock_out: str
    gross_hours: str
    break_deduction: str
    net_hours: str
    regular_hours: str
    daily_overtime: str
    weekly_overtime: str
    notes: str = ""


@dataclass(frozen=True)
class UnpairedRow:
    employee_name: str
    timestamp: str
    kind: str
    reason: str


@dataclass(frozen=True)
class EmployeeSummaryRow:
    employee_id: str
    employee_name: str
    shift_count: int
    gross_hours: str
    break_deduction: str
    net_hours: str
    regular_hours: str
    daily_overtime: str
    weekly_overtime: str


@dataclass(frozen=True)
class PayrollReport:
    """Rows handed to the CSV/Excel exporters; the only contract with them."""

    shift_rows: tuple[ShiftRow, ...]
    unpaired_rows: tuple[UnpairedRow, ...]
    summary_rows: tuple[EmployeeSummaryRow, ...] = ()
    total_net_hours: str = "0.00"

    @property
    def has_unpaired(self) -> bool:
        return bool(self.unpaired_rows)


def format_hours(hours: float) -> str:
    """Fixed two-decimal rendering; NaN and negative zero render as 0.00."""
    if hours is None or math.isnan(hours):
        return f"{0:.{HOURS_DECIMALS}f}"
    text = f"{hours:.{HOURS_DECIMALS}f}"
    if text.startswith("-") and float(text) == 0:
        text = text[1:]
    return text


def _format_minutes(minutes: float) -> str:
    return f"{minutes:g}m"


class ReportFormatter:
    def format(
        self,
        shifts: Sequence[Shift],
        unpaired: Sequence[UnpairedPunch],
        policy_for: Callable[[str], EmployeePolicy],
    ) -> PayrollReport:
        shift_rows = tuple(self._shift_row(s, policy_for(s.employee_id).name) for s in shifts)

        ordered_unpaired = sorted(unpaired, key=lambda u: u.punch.timestamp)
        unpaired_rows = tuple(
            UnpairedRow(
                employee_name=policy_for(u.employee_id).name,
                timestamp=u.punch.timestamp.strftime(TIMESTAMP_FORMAT),
                kind=u.punch.kind.value.upper(),
                reason=u.reason.value,
            )
            for u in ordered_unpaired
        )

        summary_rows = self._summary_rows(shifts, policy_for)
        total_net = sum(s.net_hours for s in shifts)
        return PayrollReport(
            shift_rows=shift_rows,
            unpaired_rows=unpaired_rows,
            summary_rows=summary_rows,
            total_net_hours=format_hours(total_net),
        )

    def _shift_row(self, shift: Shift, employee_name: str) -> ShiftRow:
        notes = []
        if shift.break_deducted:
            notes.append(f"Break deducted: {_format_minutes(shift.break_deduction_minutes)}")
        if shift.is_negative_duration:
            logger.info(
                f"Negative duration shift for employee {shift.employee_id}",
                extra={"employee_id": shift.employee_id, "action": "negative_shift"},
            )
            notes.append("Negative duration: review")

        return ShiftRow(
            employee_name=employee_name,
            date=shift.clock_in.timestamp.strftime(DATE_FORMAT),
            clock_in=shift.clock_in.timestamp.strftime(TIME_FORMAT),
            clock_out=shift.clock_out.timestamp.strftime(TIME_FORMAT),
            gross_hours=format_hours(shift.gross_hours),
            break_deduction=format_hours(shift.break_deduction_hours),
            net_hours=format_hours(shift.net_hours),
            regular_hours=format_hours(shift.regular_hours),
            daily_overtime=format_hours(shift.daily_overtime_hours),
            weekly_overtime=format_hours(shift.weekly_overtime_hours),
            notes="; ".join(notes),
        )

    @staticmethod
    def _summary_rows(
        shifts: Sequence[Shift], policy_for: Callable[[str], EmployeePolicy]
    ) -> tuple[EmployeeSummaryRow, ...]:
        totals: dict[str, dict] = {}
        for s in shifts:
            t = totals.get(s.employee_id)
            if not t:
                t = {"count": 0, "gross": 0.0, "break": 0.0, "net": 0.0, "regular": 0.0, "daily": 0.0, "weekly": 0.0}
                totals[s.employee_id] = t
            t["count"] += 1
            t["gross"] += s.gross_hours
            t["break"] += s.break_deduction_hours
            t["net"] += s.net_hours
            t["regular"] += s.regular_hours
            t["daily"] += s.daily_overtime_hours
            t["weekly"] += s.weekly_overtime_hours

        return tuple(
            EmployeeSummaryRow(
                employee_id=employee_id,
                employee_name=policy_for(employee_id).name,
                shift_count=t["count"],
                gross_hours=format_hours(t["gross"]),
                break_deduction=format_hours(t["break"]),
                net_hours=format_hours(t["net"]),
                regular_hours=format_hours(t["regular"]),
                daily_overtime=format_hours(t["daily"]),
                weekly_overtime=format_hours(t["weekly"]),
            )
            for employee_id, t in totals.items()
        )
