"""Example: build a payroll report through the service layer.

Goal: show that the engine only needs punch and employee snapshots; where they
come from (kiosk backend, export file) is up to the caller.
"""

from datetime import date

from src.kiosk_payroll.kiosk_payroll.employees.repository import InMemoryEmployeeRepository
from src.kiosk_payroll.kiosk_payroll.main import create_engine
from src.kiosk_payroll.kiosk_payroll.payroll.export import report_filename, report_to_csv
from src.kiosk_payroll.kiosk_payroll.punches.repository import InMemoryPunchRepository


def main():
    punches = InMemoryPunchRepository(
        [
            {"employeeUid": "u1", "type": "in", "timestamp": "2025-01-06T09:00:00"},
            {"employeeUid": "u1", "type": "out", "timestamp": "2025-01-06T20:00:00"},
            {"employeeUid": "u2", "type": "out", "timestamp": "2025-01-06T17:00:00"},
        ]
    )
    employees = InMemoryEmployeeRepository(
        {
            "u1": {"name": "Alice", "maxDailyHours": 8, "breakDeductionMins": 30},
            "u2": {"name": "Bob"},
        }
    )

    container = create_engine(punches=punches, employees=employees)
    start, end = date(2025, 1, 6), date(2025, 1, 12)
    report = container.payroll_report_service.build_payroll_report(start=start, end=end)

    print(report_filename(start, end))
    print(report_to_csv(report))
    print(f"Total compensable hours: {report.total_net_hours}")


if __name__ == "__main__":
    main()
