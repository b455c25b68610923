from __future__ import annotations

from datetime import date, datetime

import pytest

from fintracker.core.utils import encode_value, ensure_string_id, to_float


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1,250", 1250.0),
        ("1.250,75", 1250.75),
        ("12,5", 12.5),
        ("1,250.75", 1250.75),
        ("1,234,567", 1234567.0),
        ("$ 50.00", 50.0),
        ("-12.5", -12.5),
        ("R$ 1.234.567,8", 1234567.8),
        (42, 42.0),
    ],
)
def test_to_float_separators(raw, expected):
    assert to_float(raw) == pytest.approx(expected)


def test_to_float_without_digits_is_zero():
    assert to_float("abc") == 0.0
    assert to_float(None) == 0.0


def test_ensure_string_id():
    assert ensure_string_id(123) == "123"


def test_encode_value_turns_dates_into_datetimes():
    encoded = encode_value({"startDate": date(2024, 5, 1), "tags": [date(2024, 1, 2)], "n": 1})

    assert encoded == {"startDate": datetime(2024, 5, 1), "tags": [datetime(2024, 1, 2)], "n": 1}
