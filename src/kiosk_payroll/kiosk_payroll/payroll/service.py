from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Union

from ..common.datetime_utils import coerce_date
from ..employees.policy import PolicyDefaults, PolicyLookup, PolicyResolver
from ..employees.repository import EmployeeRepository
from ..punches.model import PunchEvent
from ..punches.normalizer import PunchNormalizer
from ..punches.repository import PunchRepository
from ..shifts.pairer import pair_punches
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .report import PayrollReport, ReportFormatter
from .weekly import WeeklyOvertimeAllocator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportParams:
    """Per-run report parameters chosen by the admin."""

    employee_id: Optional[str] = None
    start: Optional[Union[date, str]] = None
    end: Optional[Union[date, str]] = None
    apply_break_deductions: bool = True


def generate_payroll_report(
    punches: Iterable[PunchEvent],
    policy_lookup: PolicyLookup,
    params: Optional[ReportParams] = None,
    *,
    calculator: Optional[PayrollCalculator] = None,
    allocator: Optional[WeeklyOvertimeAllocator] = None,
    formatter: Optional[ReportFormatter] = None,
    defaults: Optional[PolicyDefaults] = None,
) -> PayrollReport:
    """Compute a payroll report from a punch snapshot.

    Normalizer -> Pairer -> Calculator -> Allocator -> Formatter. Raises
    InvalidRangeError before any work when the date range is inverted.
    """
    params = params or ReportParams()
    calculator = calculator or StandardPayrollCalculator()
    allocator = allocator or WeeklyOvertimeAllocator()
    formatter = formatter or ReportFormatter()
    resolver = PolicyResolver(policy_lookup, defaults or PolicyDefaults())

    normalizer = PunchNormalizer(
        employee_id=params.employee_id,
        start=coerce_date(params.start),
        end=coerce_date(params.end),
    )
    ordered = normalizer.normalize(punches)
    pairing = pair_punches(ordered)

    daily = [
        calculator.compute(p, resolver.resolve(p.employee_id), apply_break_deductions=params.apply_break_deductions)
        for p in pairing.shifts
    ]
    weekly = allocator.allocate(daily, resolver.resolve)
    report = formatter.format(weekly, pairing.unpaired, resolver.resolve)

    logger.info(
        f"Payroll report built: {len(report.shift_rows)} shifts, {len(report.unpaired_rows)} unpaired punches",
        extra={
            "employee_id": params.employee_id,
            "start": params.start,
            "end": params.end,
            "apply_break_deductions": params.apply_break_deductions,
            "action": "report_built",
        },
    )
    return report


class PayrollReportService:
    """Use case: build the payroll report from repository snapshots."""

    def __init__(
        self,
        punches: PunchRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        apply_break_deductions: bool = True,
        defaults: Optional[PolicyDefaults] = None,
    ):
        self._punches = punches
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()
        self._apply_break_deductions = bool(apply_break_deductions)
        self._defaults = defaults or PolicyDefaults()

    def build_payroll_report(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        apply_break_deductions: Optional[bool] = None,
    ) -> PayrollReport:
        if apply_break_deductions is None:
            apply_break_deductions = self._apply_break_deductions

        params = ReportParams(
            employee_id=employee_id,
            start=start,
            end=end,
            apply_break_deductions=apply_break_deductions,
        )
        return generate_payroll_report(
            self._punches.list_punches(),
            self._employees.get_policy,
            params,
            calculator=self._calculator,
            defaults=self._defaults,
        )
