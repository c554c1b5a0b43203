import importlib

import pytest

from config import get_settings_module
from config.config import env_flag

from src.kiosk_payroll.kiosk_payroll.core.enums import PunchKind
from src.kiosk_payroll.kiosk_payroll.employees.repository import InMemoryEmployeeRepository
from src.kiosk_payroll.kiosk_payroll.main import create_engine, load_settings
from src.kiosk_payroll.kiosk_payroll.punches.repository import InMemoryPunchRepository


def test_settings_module_selected_from_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "Testing")
    assert get_settings_module() == "config.testing"

    monkeypatch.setenv("APP_ENV", "staging")
    assert get_settings_module() == "config.development"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_load_settings_reads_testing_module(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    settings = load_settings()

    assert settings["DEFAULT_MAX_DAILY_HOURS"] == 8.0
    assert settings["DEFAULT_BREAK_DEDUCTION_MINUTES"] == 30.0
    assert settings["APPLY_BREAK_DEDUCTIONS"] is True
    assert settings["LOG_LEVEL"] == "DEBUG"


def test_create_engine_wires_report_service(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    punches = InMemoryPunchRepository(
        [
            {"employeeUid": "u1", "type": "in", "timestamp": "2025-01-06T09:00:00"},
            {"employeeUid": "u1", "type": "out", "timestamp": "2025-01-06T17:30:00"},
        ]
    )
    employees = InMemoryEmployeeRepository({"u1": {"name": "Alice"}})

    container = create_engine(punches=punches, employees=employees)
    report = container.payroll_report_service.build_payroll_report()

    assert punches.list_punches()[0].kind == PunchKind.IN
    assert report.shift_rows[0].employee_name == "Alice"
    assert report.shift_rows[0].net_hours == "8.00"


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("true", True), (" Yes ", True), ("on", True), ("0", False), ("False", False), ("off", False)],
)
def test_env_flag_accepts_words_and_digits(monkeypatch, raw, expected):
    monkeypatch.setenv("APPLY_BREAK_DEDUCTIONS", raw)

    assert env_flag("APPLY_BREAK_DEDUCTIONS", not expected) is expected


def test_env_flag_default_and_rejects_garbage(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    assert env_flag("DEBUG", True) is True

    monkeypatch.setenv("DEBUG", "maybe")
    with pytest.raises(ValueError):
        env_flag("DEBUG", True)


def test_config_module_imports_with_word_flags(monkeypatch):
    import config.config as base

    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("APPLY_BREAK_DEDUCTIONS", "false")
    try:
        reloaded = importlib.reload(base)
        assert reloaded.DEBUG is True
        assert reloaded.Config.APPLY_BREAK_DEDUCTIONS is False
    finally:
        monkeypatch.undo()
        importlib.reload(base)
