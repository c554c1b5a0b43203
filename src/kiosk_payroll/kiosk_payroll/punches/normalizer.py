from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..core.exceptions import InvalidRangeError
from .model import PunchEvent

logger = logging.getLogger(__name__)


def normalize_punches(
    punches: Iterable[PunchEvent],
    *,
    employee_id: Optional[str] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> list[PunchEvent]:
    """Filter punches and sort them chronologically.

    The date range is inclusive on both calendar days, i.e. a punch is kept when
    ``start 00:00 <= timestamp < (end + 1 day) 00:00`` in local
    time. Sorting is stable, so punches sharing a timestamp keep input order.
    """
    if start and end and start > end:
        raise InvalidRangeError(f"Start date {start:%Y-%m-%d} is after end date {end:%Y-%m-%d}")

    selected = []
    for punch in punches:
        if employee_id is not None and punch.employee_id != employee_id:
            continue
        punch_date = punch.timestamp.date()
        if start and punch_date < start:
            continue
        if end and punch_date > end:
            continue
        selected.append(punch)

    selected.sort(key=lambda p: p.timestamp)
    logger.debug(
        f"Normalized {len(selected)} punches",
        extra={"employee_id": employee_id, "start": start, "end": end, "action": "punches_normalized"},
    )
    return selected


@dataclass(frozen=True)
class PunchNormalizer:
    """Object form of normalize_punches, bound to one report's filters."""

    employee_id: Optional[str] = None
    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self) -> None:
        if self.start and self.end and self.start > self.end:
            raise InvalidRangeError(
                f"Start date {self.start:%Y-%m-%d} is after end date {self.end:%Y-%m-%d}"
            )

    def normalize(self, punches: Iterable[PunchEvent]) -> list[PunchEvent]:
        return normalize_punches(punches, employee_id=self.employee_id, start=self.start, end=self.end)
