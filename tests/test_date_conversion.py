"""
Tests for the interactive Hijri/Gregorian converter.
"""

from __future__ import annotations

import json

import pytest

import DateConversion
from DateConversion import convert, greg_to_hijri, hijri_to_greg
from HijriCalendar import DEFAULT_CALENDAR
from HijriDate import HijriRangeError


def _answers(monkeypatch, *answers: str) -> None:
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_hijri_to_greg() -> None:
    assert hijri_to_greg(1, 9, 1444) == ("Thursday", 23, "March", 2023)


def test_hijri_to_greg_invalid_day() -> None:
    with pytest.raises(HijriRangeError):
        hijri_to_greg(30, 2, 1444)


def test_greg_to_hijri() -> None:
    assert greg_to_hijri(23, 3, 2023) == ("Thursday", 1, "Ramadan", 1444)
    assert greg_to_hijri(16, 7, 622) == ("Friday", 1, "Muharram", 1)


@pytest.mark.parametrize("day, month, year", [(30, 2, 2023), (10, 10, 1582), (1, 13, 2023), (0, 1, 2023)])
def test_greg_to_hijri_rejects_invalid_dates(day, month, year) -> None:
    with pytest.raises(ValueError):
        greg_to_hijri(day, month, year)


def test_convert_hijri(monkeypatch) -> None:
    _answers(monkeypatch, "h", "1444", "9", "15")
    assert convert() == "Thursday, 6 April, 2023"


def test_convert_gregorian(monkeypatch) -> None:
    _answers(monkeypatch, " G ", "2023", "3", "23")
    assert convert() == "Thursday, 1 Ramadan, 1444"


def test_convert_bad_calendar(monkeypatch) -> None:
    _answers(monkeypatch, "x")
    assert convert() == "Error: invalid input."


def test_convert_bad_number(monkeypatch) -> None:
    _answers(monkeypatch, "h", "year", "1", "1")
    assert convert().startswith("Error: ")


def test_convert_bad_day(monkeypatch) -> None:
    _answers(monkeypatch, "h", "1444", "2", "30")
    assert convert() == "Error: Day must be between 1 and 29 for month 1 in year 1444"


def test_main_registers_adjustments(monkeypatch, tmp_path, capsys) -> None:
    path = tmp_path / "adjustments.json"
    path.write_text(json.dumps([{"month": 8, "days": 1}]), encoding="utf-8")
    monkeypatch.setenv("HIJRI_ADJUSTMENTS_FILE", str(path))
    monkeypatch.setattr(DateConversion.Logger, "setup_logger", lambda **kwargs: None)
    _answers(monkeypatch, "h", "1444", "9", "15")

    DateConversion.main()

    assert capsys.readouterr().out.strip() == "Friday, 7 April, 2023"
    assert DEFAULT_CALENDAR.days_in_month(1444, 8) == 31
