from __future__ import annotations

from dataclasses import dataclass

from .employees.policy import PolicyDefaults
from .employees.repository import EmployeeRepository
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollReportService
from .punches.repository import PunchRepository


@dataclass(frozen=True)
class Container:
    punches_repo: PunchRepository
    employees_repo: EmployeeRepository

    policy_defaults: PolicyDefaults
    payroll_report_service: PayrollReportService


def build_container(*, punches: PunchRepository, employees: EmployeeRepository, settings: dict) -> Container:
    policy_defaults = PolicyDefaults(
        max_daily_hours=float(settings["DEFAULT_MAX_DAILY_HOURS"]),
        break_deduction_minutes=float(settings["DEFAULT_BREAK_DEDUCTION_MINUTES"]),
    )
    payroll_report_service = PayrollReportService(
        punches,
        employees,
        calculator=StandardPayrollCalculator(),
        apply_break_deductions=bool(settings.get("APPLY_BREAK_DEDUCTIONS", True)),
        defaults=policy_defaults,
    )

    return Container(
        punches_repo=punches,
        employees_repo=employees,
        policy_defaults=policy_defaults,
        payroll_report_service=payroll_report_service,
    )
