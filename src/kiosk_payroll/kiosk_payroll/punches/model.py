from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_timestamp
from ..common.validators import require_non_empty
from ..core.enums import PunchKind
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class PunchEvent:
    """Domain entity: one clock-in or clock-out recorded by the kiosk or an admin edit."""

    employee_id: str
    kind: PunchKind
    timestamp: datetime
    punch_id: Optional[str] = None

    def __post_init__(self) -> None:
        # all punches share one clock: aware, local time
        object.__setattr__(self, "timestamp", coerce_timestamp(self.timestamp))

    @property
    def is_clock_in(self) -> bool:
        return self.kind == PunchKind.IN

    @property
    def is_clock_out(self) -> bool:
        return self.kind == PunchKind.OUT

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "PunchEvent":
        """Build a punch from a time-log record.

        Accepts both the kiosk field names (``employeeUid``/``employeeId``,
        ``type``) and snake_case ones (``employee_id``, ``kind``).
        """
        employee_id = require_non_empty(
            _first(record, "employee_id", "employeeId", "employeeUid"), "employee_id"
        )
        raw_kind = _first(record, "kind", "type")
        try:
            kind = raw_kind if isinstance(raw_kind, PunchKind) else PunchKind(str(raw_kind).strip().lower())
        except ValueError:
            raise ValidationError(f"Invalid punch kind: {raw_kind!r}")

        raw_ts = _first(record, "timestamp")
        if raw_ts is None:
            raise ValidationError("timestamp is required")

        punch_id = _first(record, "punch_id", "id")
        return cls(
            employee_id=employee_id,
            kind=kind,
            timestamp=raw_ts,
            punch_id=str(punch_id) if punch_id is not None else None,
        )


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None
