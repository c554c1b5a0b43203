from __future__ import annotations

from enum import Enum


class PunchKind(str, Enum):
    """Kind of a kiosk punch, stored lowercase like the kiosk writes it."""

    IN = "in"
    OUT = "out"


class EmployeeStatus(str, Enum):
    """Clock status shown on the kiosk, derived from the latest punch."""

    IN = "in"
    OUT = "out"


class UnpairedReason(str, Enum):
    """Why a punch could not be matched into a shift."""

    MISSING_CLOCK_OUT = "MISSING_CLOCK_OUT"
    SUPERSEDED_CLOCK_IN = "SUPERSEDED_CLOCK_IN"
    MISSING_CLOCK_IN = "MISSING_CLOCK_IN"
