from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, Sequence, Union

from .model import PunchEvent


class PunchRepository(Protocol):
    """Source of the punch snapshot a report is computed from.

    Note (DIP): the payroll service depends on this interface, never on a
    concrete storage backend.
    """

    def list_punches(self) -> Sequence[PunchEvent]:
        raise NotImplementedError


class InMemoryPunchRepository:
    """Immutable snapshot of punches, e.g. loaded once from the kiosk backend."""

    def __init__(self, punches: Iterable[Union[PunchEvent, Mapping[str, Any]]] = ()):
        self._punches = tuple(
            p if isinstance(p, PunchEvent) else PunchEvent.from_record(p) for p in punches
        )

    def list_punches(self) -> Sequence[PunchEvent]:
        return self._punches
