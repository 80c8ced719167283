import pytest

from worktime.common.timecalc import (
    elapsed_hours,
    format_duration,
    format_time_12h,
    is_valid_time,
    normalize_time,
    to_minutes,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("9:00 AM", "09:00"),
        ("12:15 AM", "00:15"),
        ("12:00 PM", "12:00"),
        ("5:30 pm", "17:30"),
        ("17:30", "17:30"),
        ("9:05", "09:05"),
        (" 07:45:00 ", "07:45"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_time(raw, expected):
    assert normalize_time(raw) == expected


def test_normalize_time_is_idempotent():
    for raw in ["9:00 AM", "11:59 PM", "00:00", "7:15", "23:45"]:
        once = normalize_time(raw)
        assert normalize_time(once) == once


def test_normalize_time_rejects_malformed_meridiem():
    with pytest.raises(ValueError):
        normalize_time("nine AM")


def test_to_minutes_and_validity():
    assert to_minutes("01:30") == 90
    assert to_minutes("1:30 PM") == 13 * 60 + 30
    assert is_valid_time("23:59")
    assert not is_valid_time("24:00")
    assert not is_valid_time("9")


def test_elapsed_hours_subtracts_break():
    assert elapsed_hours("09:00", "17:30", 30) == 8.0
    assert elapsed_hours("9:00 AM", "5:30 PM", 30) == 8.0


def test_elapsed_hours_overnight_shift_wraps_once():
    assert elapsed_hours("22:00", "06:00", 0) == 8.0


def test_elapsed_hours_equal_times_is_a_full_day():
    assert elapsed_hours("08:00", "08:00") == 24.0


def test_elapsed_hours_break_longer_than_shift_is_negative():
    assert elapsed_hours("09:00", "10:00", 120) == -1.0


def test_elapsed_hours_open_entry():
    assert elapsed_hours("09:00", None) is None
    assert elapsed_hours("", "17:00") is None


def test_format_duration():
    assert format_duration(330) == "5h 30m"
    assert format_duration(45) == "0h 45m"


def test_format_time_12h():
    assert format_time_12h("00:05") == "12:05 AM"
    assert format_time_12h("12:00") == "12:00 PM"
    assert format_time_12h("17:30") == "5:30 PM"
    assert format_time_12h("9:00 AM") == "9:00 AM"
    assert format_time_12h("") == ""
