from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from ..common.datetime_utils import hours_between
from ..core.enums import UnpairedReason
from ..punches.model import PunchEvent


@dataclass(frozen=True)
class PairedShift:
    """A matched clock-in/clock-out pair, before any hour calculation."""

    clock_in: PunchEvent
    clock_out: PunchEvent

    @property
    def employee_id(self) -> str:
        return self.clock_in.employee_id

    @property
    def duration(self) -> timedelta:
        return self.clock_out.timestamp - self.clock_in.timestamp

    @property
    def gross_hours(self) -> float:
        return hours_between(self.clock_in.timestamp, self.clock_out.timestamp)

    @property
    def is_negative(self) -> bool:
        return self.duration < timedelta(0)


@dataclass(frozen=True)
class UnpairedPunch:
    """A punch left for manual review; never dropped from the report."""

    punch: PunchEvent
    reason: UnpairedReason

    @property
    def employee_id(self) -> str:
        return self.punch.employee_id


@dataclass(frozen=True)
class PairingResult:
    shifts: tuple[PairedShift, ...]
    unpaired: tuple[UnpairedPunch, ...]
