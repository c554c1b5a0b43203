from __future__ import annotations

import csv
import io
from dataclasses import asdict
from datetime import date
from typing import Optional

import pandas as pd

from .report import PayrollReport

SHIFT_COLUMNS = {
    "employee_name": "Employee",
    "date": "Date",
    "clock_in": "Clock In",
    "clock_out": "Clock Out",
    "gross_hours": "Gross Hours",
    "break_deduction": "Break Deduction",
    "net_hours": "Net Hours",
    "regular_hours": "Regular Hours",
    "daily_overtime": "Daily OT",
    "weekly_overtime": "Weekly OT",
    "notes": "Notes",
}

UNPAIRED_COLUMNS = {
    "employee_name": "Employee",
    "timestamp": "Date/Time",
    "kind": "Type",
    "reason": "Reason",
}

SUMMARY_COLUMNS = {
    "employee_name": "Employee",
    "shift_count": "Shifts",
    "gross_hours": "Gross Hours",
    "break_deduction": "Break Deduction",
    "net_hours": "Net Hours",
    "regular_hours": "Regular Hours",
    "daily_overtime": "Daily OT",
    "weekly_overtime": "Weekly OT",
}

UNPAIRED_MARKER = "--- UNPAIRED PUNCHES (Review Required) ---"


def report_filename(start: Optional[date], end: Optional[date], ext: str = "csv") -> str:
    start_part = start.strftime("%Y-%m-%d") if start else "all"
    end_part = end.strftime("%Y-%m-%d") if end else "all"
    return f"payroll_report_{start_part}_to_{end_part}.{ext}"


def report_to_csv(report: PayrollReport) -> str:
    """Write report rows as CSV text.

    Shift rows first; unpaired punches follow as a separate section after a
    blank line and a marker row, only when there are any.
    """

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(SHIFT_COLUMNS.values())
    for row in report.shift_rows:
        data = asdict(row)
        writer.writerow(data[key] for key in SHIFT_COLUMNS)

    if report.has_unpaired:
        writer.writerow([])
        writer.writerow([UNPAIRED_MARKER])
        writer.writerow(UNPAIRED_COLUMNS.values())
        for row in report.unpaired_rows:
            data = asdict(row)
            writer.writerow(data[key] for key in UNPAIRED_COLUMNS)

    return out.getvalue()


def report_to_excel(report: PayrollReport) -> bytes:
    """Write the report as an .xlsx workbook with Shifts, Summary and Unpaired sheets.

    Values stay the formatted strings from the report so the workbook shows
    exactly what the CSV shows.
    """

    sheets = {
        "Shifts": _frame(report.shift_rows, SHIFT_COLUMNS),
        "Summary": _frame(report.summary_rows, SUMMARY_COLUMNS),
        "Unpaired": _frame(report.unpaired_rows, UNPAIRED_COLUMNS),
    }

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        for sheet_name, df in sheets.items():
            df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()


def _frame(rows, columns: dict[str, str]) -> pd.DataFrame:
    df = pd.DataFrame([asdict(r) for r in rows], columns=list(columns))
    return df.rename(columns=columns)
