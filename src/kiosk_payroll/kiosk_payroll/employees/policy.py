from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

from ..common.validators import require_non_negative
from ..core.constants import DEFAULT_BREAK_DEDUCTION_MINUTES, DEFAULT_EMPLOYEE_NAME, DEFAULT_MAX_DAILY_HOURS
from ..core.exceptions import MissingPolicyError, ValidationError
from .model import EmployeePolicy

logger = logging.getLogger(__name__)

PolicyRecord = Union[EmployeePolicy, Mapping[str, Any]]
PolicyLookup = Union[Callable[[str], Optional[PolicyRecord]], Mapping[str, PolicyRecord]]


@dataclass(frozen=True)
class PolicyDefaults:
    """Values used when an employee record lacks a field (or is missing entirely)."""

    max_daily_hours: float = DEFAULT_MAX_DAILY_HOURS
    break_deduction_minutes: float = DEFAULT_BREAK_DEDUCTION_MINUTES
    name: str = DEFAULT_EMPLOYEE_NAME


def resolve_policy(
    employee_id: str,
    record: Optional[PolicyRecord],
    *,
    defaults: PolicyDefaults = PolicyDefaults(),
    strict: bool = True,
) -> EmployeePolicy:
    """Turn an employee record into a complete policy.

    Absent fields take the documented defaults; present fields are validated
    (a zero break length is a real setting, not an absent one). With
    ``strict=False`` an unusable value is logged and replaced by its default.
    """
    if isinstance(record, EmployeePolicy):
        return record
    record = record or {}

    max_daily = _pick(record, "max_daily_hours", "maxDailyHours")
    break_minutes = _pick(record, "break_deduction_minutes", "breakDeductionMinutes", "breakDeductionMins")
    name = _pick(record, "name", "employeeName")

    return EmployeePolicy(
        employee_id=employee_id,
        name=str(name) if name is not None else defaults.name,
        max_daily_hours=_number_field(
            employee_id, max_daily, "max_daily_hours", defaults.max_daily_hours, strict
        ),
        break_deduction_minutes=_number_field(
            employee_id, break_minutes, "break_deduction_minutes", defaults.break_deduction_minutes, strict
        ),
    )


def _number_field(employee_id: str, value: Any, field_name: str, default: float, strict: bool) -> float:
    if value is None:
        return default
    try:
        return require_non_negative(value, field_name)
    except ValidationError as exc:
        if strict:
            raise
        logger.warning(
            f"Invalid {field_name} for employee {employee_id} ({exc}), using default {default:g}",
            extra={"employee_id": employee_id, "field": field_name, "action": "policy_fallback"},
        )
        return default


def default_policy(employee_id: str, *, defaults: PolicyDefaults = PolicyDefaults()) -> EmployeePolicy:
    return resolve_policy(employee_id, None, defaults=defaults)


@dataclass
class PolicyResolver:
    """Resolve policies for one report run, falling back to defaults per employee.

    A missing employee or a bad field must not block payroll generation, so
    ``resolve`` recovers locally with defaults; ``require`` lets callers see
    MissingPolicyError and ValidationError.
    """

    lookup: PolicyLookup
    defaults: PolicyDefaults = field(default_factory=PolicyDefaults)
    _cache: dict[str, EmployeePolicy] = field(default_factory=dict, init=False, repr=False)

    def require(self, employee_id: str, *, strict: bool = True) -> EmployeePolicy:
        if isinstance(self.lookup, Mapping):
            record = self.lookup.get(employee_id)
        else:
            record = self.lookup(employee_id)
        if record is None:
            raise MissingPolicyError(employee_id)
        return resolve_policy(employee_id, record, defaults=self.defaults, strict=strict)

    def resolve(self, employee_id: str) -> EmployeePolicy:
        cached = self._cache.get(employee_id)
        if cached is not None:
            return cached
        try:
            policy = self.require(employee_id, strict=False)
        except MissingPolicyError:
            logger.warning(
                f"No policy for employee {employee_id}, using defaults",
                extra={"employee_id": employee_id, "action": "policy_fallback"},
            )
            policy = default_policy(employee_id, defaults=self.defaults)
        self._cache[employee_id] = policy
        return policy


def _pick(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None
