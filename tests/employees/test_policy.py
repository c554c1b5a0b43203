import pytest

from src.kiosk_payroll.kiosk_payroll.core.exceptions import MissingPolicyError, ValidationError
from src.kiosk_payroll.kiosk_payroll.employees.model import EmployeePolicy
from src.kiosk_payroll.kiosk_payroll.employees.policy import PolicyDefaults, PolicyResolver, resolve_policy
from src.kiosk_payroll.kiosk_payroll.employees.repository import InMemoryEmployeeRepository


def test_absent_fields_take_defaults():
    policy = resolve_policy("u1", {"name": "Alice"})

    assert policy == EmployeePolicy(employee_id="u1", name="Alice", max_daily_hours=8.0, break_deduction_minutes=30)
    assert policy.break_trigger_hours == 6.0
    assert policy.weekly_regular_cap_hours == 40.0


def test_kiosk_field_names_are_read():
    policy = resolve_policy("u1", {"name": "Alice", "maxDailyHours": 10, "breakDeductionMins": 45})

    assert policy.max_daily_hours == 10
    assert policy.break_deduction_minutes == 45
    assert policy.break_deduction_hours == pytest.approx(0.75)


def test_zero_break_is_kept():
    policy = resolve_policy("u1", {"breakDeductionMinutes": 0})

    assert policy.break_deduction_minutes == 0


def test_negative_values_are_rejected():
    with pytest.raises(ValidationError):
        resolve_policy("u1", {"maxDailyHours": -1})


def test_custom_defaults_apply():
    policy = resolve_policy("u1", None, defaults=PolicyDefaults(max_daily_hours=7.5, break_deduction_minutes=20))

    assert policy.max_daily_hours == 7.5
    assert policy.break_deduction_minutes == 20
    assert policy.name == "Unknown"


def test_require_raises_for_unknown_employee():
    resolver = PolicyResolver({})

    with pytest.raises(MissingPolicyError) as exc:
        resolver.require("ghost")
    assert exc.value.employee_id == "ghost"


def test_resolve_falls_back_to_defaults_and_logs(caplog):
    resolver = PolicyResolver(lambda employee_id: None)

    with caplog.at_level("WARNING"):
        policy = resolver.resolve("ghost")

    assert policy == EmployeePolicy(employee_id="ghost")
    assert "ghost" in caplog.text


def test_resolver_uses_repository_lookup():
    repo = InMemoryEmployeeRepository({"u1": {"name": "Alice", "maxDailyHours": 9}})
    resolver = PolicyResolver(repo.get_policy)

    assert resolver.resolve("u1").max_daily_hours == 9
    assert resolver.resolve("u1").name == "Alice"


@pytest.mark.parametrize("bad", ["", "eight", -2, float("nan")])
def test_lenient_resolution_replaces_bad_values_with_defaults(bad, caplog):
    with caplog.at_level("WARNING"):
        policy = resolve_policy("u1", {"maxDailyHours": bad, "breakDeductionMinutes": 15}, strict=False)

    assert policy.max_daily_hours == 8.0
    assert policy.break_deduction_minutes == 15
    assert "max_daily_hours" in caplog.text


def test_resolve_keeps_good_fields_of_a_partly_bad_record(caplog):
    resolver = PolicyResolver({"u1": {"name": "Alice", "maxDailyHours": 9, "breakDeductionMinutes": "n/a"}})

    with caplog.at_level("WARNING"):
        policy = resolver.resolve("u1")

    assert (policy.name, policy.max_daily_hours, policy.break_deduction_minutes) == ("Alice", 9, 30)
    assert any(getattr(r, "action", None) == "policy_fallback" for r in caplog.records)


def test_require_still_rejects_bad_values():
    resolver = PolicyResolver({"u1": {"maxDailyHours": ""}})

    with pytest.raises(ValidationError):
        resolver.require("u1")


def test_repository_snapshot_tolerates_a_bad_record():
    repo = InMemoryEmployeeRepository({"good": {"maxDailyHours": 9}, "bad": {"maxDailyHours": ""}})

    assert repo.get_policy("good").max_daily_hours == 9
    assert repo.get_policy("bad").max_daily_hours == 8.0
