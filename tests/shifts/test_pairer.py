from datetime import datetime, timedelta
from itertools import permutations

from src.kiosk_payroll.kiosk_payroll.core.enums import PunchKind, UnpairedReason
from src.kiosk_payroll.kiosk_payroll.punches.model import PunchEvent
from src.kiosk_payroll.kiosk_payroll.punches.normalizer import normalize_punches
from src.kiosk_payroll.kiosk_payroll.shifts.pairer import pair_punches

MONDAY = datetime(2025, 1, 6)


def _punch(employee_id, kind, hour, minute=0):
    return PunchEvent(
        employee_id=employee_id,
        kind=PunchKind(kind),
        timestamp=MONDAY + timedelta(hours=hour, minutes=minute),
    )


def _spans(result):
    return [(s.employee_id, s.clock_in.timestamp.hour, s.clock_out.timestamp.hour) for s in result.shifts]


def test_simple_in_out_pair():
    result = pair_punches([_punch("u1", "in", 9), _punch("u1", "out", 17)])

    assert _spans(result) == [("u1", 9, 17)]
    assert result.unpaired == ()


def test_greedy_match_keeps_earliest_clock_in():
    first_in = _punch("u1", "in", 9)
    second_in = _punch("u1", "in", 10)
    out = _punch("u1", "out", 17)

    result = pair_punches([first_in, second_in, out])

    assert len(result.shifts) == 1
    assert result.shifts[0].clock_in == first_in
    assert result.shifts[0].clock_out == out
    assert [(u.punch, u.reason) for u in result.unpaired] == [(second_in, UnpairedReason.SUPERSEDED_CLOCK_IN)]


def test_lone_clock_out_is_unpaired_not_a_shift():
    out = _punch("u1", "out", 17)

    result = pair_punches([out])

    assert result.shifts == ()
    assert [(u.punch, u.reason) for u in result.unpaired] == [(out, UnpairedReason.MISSING_CLOCK_IN)]


def test_trailing_clock_in_is_unpaired():
    dangling = _punch("u1", "in", 18)

    result = pair_punches([_punch("u1", "in", 9), _punch("u1", "out", 17), dangling])

    assert _spans(result) == [("u1", 9, 17)]
    assert [(u.punch, u.reason) for u in result.unpaired] == [(dangling, UnpairedReason.MISSING_CLOCK_OUT)]


def test_other_employees_punches_stay_eligible():
    punches = [
        _punch("a", "in", 8),
        _punch("b", "out", 9),
        _punch("b", "in", 10),
        _punch("a", "out", 12),
        _punch("b", "out", 13),
    ]

    result = pair_punches(punches)

    assert _spans(result) == [("a", 8, 12), ("b", 10, 13)]
    assert [(u.employee_id, u.reason) for u in result.unpaired] == [("b", UnpairedReason.MISSING_CLOCK_IN)]


def test_interleaved_employees_are_ordered_by_clock_in():
    punches = [
        _punch("a", "in", 9),
        _punch("b", "in", 9, 30),
        _punch("a", "out", 17),
        _punch("b", "out", 18),
    ]

    result = pair_punches(punches)

    assert _spans(result) == [("a", 9, 17), ("b", 9, 18)]


def test_zero_duration_shift_is_still_paired():
    result = pair_punches([_punch("u1", "in", 9), _punch("u1", "out", 9)])

    assert len(result.shifts) == 1
    assert result.shifts[0].gross_hours == 0


def test_unpaired_punches_are_chronological():
    punches = [
        _punch("a", "out", 7),
        _punch("b", "out", 8),
        _punch("a", "in", 20),
    ]

    result = pair_punches(punches)

    assert [u.punch.timestamp.hour for u in result.unpaired] == [7, 8, 20]


def test_pairing_is_independent_of_input_order():
    punches = [
        _punch("a", "in", 8),
        _punch("a", "in", 9),
        _punch("b", "out", 10),
        _punch("a", "out", 16),
        _punch("b", "in", 17),
    ]
    expected = pair_punches(normalize_punches(punches))

    for perm in permutations(punches):
        assert pair_punches(normalize_punches(perm)) == expected
