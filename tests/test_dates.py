from datetime import date, datetime, timezone

import pytest

from station_normalizer.core.dates import day_of_year, day_of_year_str, utc_midnight


def test_day_of_year():
    assert day_of_year(datetime(2023, 1, 1, tzinfo=timezone.utc)) == 1


def test_day_of_year_leap_year():
    assert day_of_year(date(2020, 2, 29)) == 60
    assert day_of_year(date(2020, 12, 31)) == 366


def test_day_of_year_str():
    assert day_of_year_str("2023-01-01") == 1
    assert day_of_year_str("2023-03-01") == 60


@pytest.mark.parametrize("value", ["2023-01-32", "01/02/2023", ""])
def test_day_of_year_str_invalid_format(value):
    with pytest.raises(ValueError, match="Invalid date format"):
        day_of_year_str(value)


def test_utc_midnight():
    assert utc_midnight(date(2024, 6, 1)) == datetime(2024, 6, 1, 0, 0, tzinfo=timezone.utc)
