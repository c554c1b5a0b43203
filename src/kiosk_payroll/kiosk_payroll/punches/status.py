from __future__ import annotations

from typing import Iterable

from ..core.enums import EmployeeStatus, PunchKind
from .model import PunchEvent


def derive_status(punches: Iterable[PunchEvent], employee_id: str) -> EmployeeStatus:
    """Status implied by the employee's most recent punch.

    Used after an admin edits or deletes a log entry; with no punches left the
    employee is considered clocked out.
    """
    latest = None
    for punch in punches:
        if punch.employee_id != employee_id:
            continue
        if latest is None or punch.timestamp >= latest.timestamp:
            latest = punch
    if latest is None:
        return EmployeeStatus.OUT
    return EmployeeStatus(latest.kind.value)


def next_punch_kind(status: EmployeeStatus) -> PunchKind:
    """Kiosk toggle: a clocked-in employee clocks out next, anyone else clocks in."""
    return PunchKind.OUT if status == EmployeeStatus.IN else PunchKind.IN
