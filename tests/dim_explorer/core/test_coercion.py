from __future__ import annotations

import json
import math
from datetime import date, datetime, timezone

import pytest

from dim_explorer.core.coercion import (
    MISSING_LABEL,
    day_start,
    format_date,
    is_missing,
    to_label,
    to_number,
    to_timestamp,
)


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n", float("nan"), float("inf")])
def test_is_missing_for_absent_values(value):
    assert is_missing(value)


def test_to_number_passes_finite_numbers_through():
    assert to_number(20) == 20.0
    assert to_number(-3.5) == -3.5
    assert to_number(0) == 0.0


def test_to_number_parses_trimmed_decimal_strings():
    assert to_number(" 41 ") == 41.0
    assert to_number("2.5") == 2.5
    assert to_number("-1e3") == -1000.0
    assert to_number(".5") == 0.5


@pytest.mark.parametrize(
    "value",
    [None, "", "  ", "abc", "12abc", "1_000", "nan", "Infinity", float("nan"), float("inf"), True, [], {}, "1e999"],
)
def test_to_number_degrades_to_missing(value):
    assert to_number(value) is None


def test_to_timestamp_parses_iso_dates_as_utc_midnight():
    expected = datetime(2024, 3, 1, tzinfo=timezone.utc).timestamp() * 1000
    assert to_timestamp("2024-03-01") == expected


def test_to_timestamp_parses_date_times_with_offsets():
    utc = to_timestamp("2024-03-01T10:30:00Z")
    offset = to_timestamp("2024-03-01T12:30:00+02:00")
    naive = to_timestamp("2024-03-01T10:30:00")
    assert utc == offset == naive
    assert to_timestamp("2024-03-01T10:30:00.250Z") == utc + 250


def test_to_timestamp_accepts_epoch_milliseconds_and_date_objects():
    assert to_timestamp(0) == 0.0
    assert to_timestamp(86_400_000) == 86_400_000.0
    assert to_timestamp(date(1970, 1, 2)) == 86_400_000.0


@pytest.mark.parametrize(
    "value",
    [None, "", "  ", "yesterday", "2024-02-30", "2024/03/01", "03-01-2024", "2024", True, float("nan"), 1e300, {}],
)
def test_to_timestamp_degrades_to_missing(value):
    assert to_timestamp(value) is None


def test_day_start_truncates_to_utc_day():
    ts = to_timestamp("2024-03-01T23:59:59Z")
    assert day_start(ts) == to_timestamp("2024-03-01")


def test_format_date_round_trips_calendar_days():
    assert format_date(to_timestamp("2016-11-30T09:15:00Z")) == "2016-11-30"
    assert format_date(0) == "1970-01-01"


def test_to_label_uses_sentinel_for_missing():
    assert to_label(None) == MISSING_LABEL
    assert to_label("") == MISSING_LABEL
    assert to_label("   ") == MISSING_LABEL


def test_to_label_keeps_strings_untrimmed_and_numbers_canonical():
    assert to_label(" red ") == " red "
    assert to_label(20) == "20"
    assert to_label(20.0) == "20"
    assert to_label(2.5) == "2.5"


def test_coercion_never_raises_on_odd_input():
    odd = [object(), b"bytes", (1, 2), math.pi, -0.0, " "]
    for value in odd:
        to_number(value)
        to_timestamp(value)
        assert isinstance(to_label(value), str)


def test_integers_beyond_float_range_are_missing():
    huge = json.loads("1" + "0" * 400)

    assert to_number(huge) is None
    assert to_number(-huge) is None
    assert to_timestamp(huge) is None
    assert to_label(huge) == "1" + "0" * 400


def test_timestamps_outside_representable_years_are_missing():
    assert to_timestamp("0001-01-01T00:00+01:00") is None
    assert to_timestamp("9999-12-31T23:59:59-01:00") is None
    assert to_timestamp(datetime(1, 1, 1, tzinfo=timezone.utc)) is not None


def test_format_date_pads_years_below_1000():
    assert format_date(to_timestamp("0999-05-01")) == "0999-05-01"
    assert format_date(to_timestamp("0001-01-01")) == "0001-01-01"


@pytest.mark.parametrize("value", ["١٢", "۳.۵", "٢٠٢٤-٠١-٠١"])
def test_non_ascii_digits_are_not_parsed(value):
    assert to_number(value) is None
    assert to_timestamp(value) is None
