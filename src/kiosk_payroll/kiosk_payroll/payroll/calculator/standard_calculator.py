from __future__ import annotations

from .base import PayrollCalculator
from ...employees.model import EmployeePolicy
from ...shifts.model import PairedShift
from ..model import Shift


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: break deducted past the trigger, then net hours split at the daily limit."""

    def compute(self, paired: PairedShift, policy: EmployeePolicy, *, apply_break_deductions: bool) -> Shift:
        gross = paired.gross_hours

        deduction = 0.0
        if apply_break_deductions and gross > policy.break_trigger_hours:
            deduction = policy.break_deduction_hours
        net = gross - deduction

        regular_portion = min(net, policy.max_daily_hours)
        daily_overtime = max(0.0, net - policy.max_daily_hours)

        return Shift(
            employee_id=paired.employee_id,
            clock_in=paired.clock_in,
            clock_out=paired.clock_out,
            gross_hours=gross,
            break_deduction_minutes=policy.break_deduction_minutes if deduction else 0,
            break_deduction_hours=deduction,
            net_hours=net,
            regular_portion=regular_portion,
            regular_hours=regular_portion,
            daily_overtime_hours=daily_overtime,
        )
