"""Shared fixtures: every test starts with an empty default calendar."""

from __future__ import annotations

import pytest

from HijriCalendar import register_adjustments


@pytest.fixture(autouse=True)
def clear_adjustments():
    register_adjustments([])
    yield
    register_adjustments([])
