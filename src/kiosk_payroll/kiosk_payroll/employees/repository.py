from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Protocol, Union

from .model import EmployeePolicy
from .policy import resolve_policy


class EmployeeRepository(Protocol):
    """Repository interface for employee policies.

    Note (DIP): the payroll service depends on this interface, not on the
    backend that stores employee records.
    """

    def get_policy(self, employee_id: str) -> Optional[EmployeePolicy]:
        raise NotImplementedError


class InMemoryEmployeeRepository:
    """Snapshot of employee records keyed by employee id.

    Bad field values fall back to defaults (logged) so one record cannot block
    a report run.
    """

    def __init__(self, employees: Union[Iterable[EmployeePolicy], Mapping[str, Mapping[str, Any]]] = ()):
        if isinstance(employees, Mapping):
            self._policies = {
                str(employee_id): resolve_policy(str(employee_id), record, strict=False)
                for employee_id, record in employees.items()
            }
        else:
            self._policies = {p.employee_id: p for p in employees}

    def get_policy(self, employee_id: str) -> Optional[EmployeePolicy]:
        return self._policies.get(employee_id)
