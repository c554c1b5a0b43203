from __future__ import annotations

import logging
from typing import Sequence

from ..core.enums import UnpairedReason
from ..punches.model import PunchEvent
from .model import PairedShift, PairingResult, UnpairedPunch

logger = logging.getLogger(__name__)


def pair_punches(punches: Sequence[PunchEvent]) -> PairingResult:
    """Match clock-ins to clock-outs with a greedy forward scan.

    ``punches`` must already be sorted (see normalize_punches). Each clock-in
    is closed by the first later clock-out of the same employee, even when
    other punches sit in between. Same-employee clock-ins skipped over that
    way are reported as superseded; other employees' punches stay eligible
    for their own shifts. A clock-out with no open clock-in is unpaired.
    Non-positive durations are still paired.
    """
    positions: dict[str, list[int]] = {}
    for index, punch in enumerate(punches):
        positions.setdefault(punch.employee_id, []).append(index)

    paired: list[tuple[int, PairedShift]] = []
    unpaired: list[tuple[int, UnpairedPunch]] = []

    for indexes in positions.values():
        pos = 0
        while pos < len(indexes):
            i = indexes[pos]
            current = punches[i]
            if current.is_clock_out:
                unpaired.append((i, UnpairedPunch(current, UnpairedReason.MISSING_CLOCK_IN)))
                pos += 1
                continue

            end = pos + 1
            while end < len(indexes) and not punches[indexes[end]].is_clock_out:
                end += 1

            if end == len(indexes):
                # only clock-ins remain for this employee
                for k in indexes[pos:]:
                    unpaired.append((k, UnpairedPunch(punches[k], UnpairedReason.MISSING_CLOCK_OUT)))
                break

            for k in indexes[pos + 1:end]:
                unpaired.append((k, UnpairedPunch(punches[k], UnpairedReason.SUPERSEDED_CLOCK_IN)))
            paired.append((i, PairedShift(clock_in=current, clock_out=punches[indexes[end]])))
            pos = end + 1

    paired.sort(key=lambda item: item[0])
    unpaired.sort(key=lambda item: item[0])

    for _, item in unpaired:
        logger.info(
            f"Unpaired {item.punch.kind.value} punch for employee {item.employee_id}: {item.reason.value}",
            extra={"employee_id": item.employee_id, "reason": item.reason.value, "action": "punch_unpaired"},
        )

    return PairingResult(
        shifts=tuple(shift for _, shift in paired),
        unpaired=tuple(item for _, item in unpaired),
    )
