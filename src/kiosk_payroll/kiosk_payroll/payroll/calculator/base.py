from __future__ import annotations

from abc import ABC, abstractmethod

from ...employees.model import EmployeePolicy
from ...shifts.model import PairedShift
from ..model import Shift


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(self, paired: PairedShift, policy: EmployeePolicy, *, apply_break_deductions: bool) -> Shift:
        raise NotImplementedError
