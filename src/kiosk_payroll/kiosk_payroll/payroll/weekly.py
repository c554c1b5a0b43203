from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Sequence

from ..common.datetime_utils import week_start
from ..employees.model import EmployeePolicy
from .model import Shift, WeeklyBucket

logger = logging.getLogger(__name__)


class WeeklyOvertimeAllocator:
    """Second pass: move regular time past the weekly cap into weekly overtime.

    Runs after every shift has been through the daily calculator. Each
    employee's shifts are taken in clock-in order and grouped by the Monday
    00:00 that starts their week. A bucket tracks the regular time the week
    has *asked for* (each shift's regular_portion), not the time it was
    granted, so once the cap is reached every later regular-eligible hour in
    that week is weekly overtime.
    """

    def allocate(self, shifts: Sequence[Shift], policy_for: Callable[[str], EmployeePolicy]) -> list[Shift]:
        buckets: dict[tuple[str, datetime], WeeklyBucket] = {}
        allocated: dict[int, Shift] = {}

        order = sorted(range(len(shifts)), key=lambda i: (shifts[i].employee_id, shifts[i].clock_in.timestamp))
        for i in order:
            shift = shifts[i]
            key = (shift.employee_id, week_start(shift.clock_in.timestamp))
            bucket = buckets.get(key)
            if bucket is None:
                bucket = WeeklyBucket(employee_id=key[0], week_start=key[1])
                buckets[key] = bucket

            cap = policy_for(shift.employee_id).weekly_regular_cap_hours
            allocated[i] = self._split(shift, bucket, cap)

        logger.debug(
            f"Allocated weekly overtime over {len(buckets)} employee-weeks",
            extra={"shift_count": len(shifts), "bucket_count": len(buckets), "action": "weekly_allocated"},
        )
        return [allocated[i] for i in range(len(shifts))]

    @staticmethod
    def _split(shift: Shift, bucket: WeeklyBucket, cap: float) -> Shift:
        demand = shift.regular_portion
        remaining = cap - bucket.cumulative_regular

        if remaining <= 0:
            regular = 0.0
            weekly_overtime = demand
        else:
            regular = min(demand, remaining)
            weekly_overtime = demand - regular

        bucket.cumulative_regular += demand
        return replace(shift, regular_hours=regular, weekly_overtime_hours=weekly_overtime)
