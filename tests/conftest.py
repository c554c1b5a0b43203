"""Shared fixtures for the payroll tests."""

import os
import time

import pytest


@pytest.fixture
def eastern_tz():
    """Run the test with US Eastern time (UTC-5, DST from March) as the local timezone."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    previous = os.environ.get("TZ")
    os.environ["TZ"] = "EST5EDT,M3.2.0,M11.1.0"
    time.tzset()
    yield
    if previous is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = previous
    time.tzset()
