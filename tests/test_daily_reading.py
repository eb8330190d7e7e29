from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from station_normalizer.core.errors import MissingUnitError, MissingValueError, UnitError
from station_normalizer.models.reading import DailyReading, Measurement

DAY = date(2024, 6, 1)


@pytest.mark.parametrize(
    "field, label",
    [
        ("rhmin", "Relative humidity min"),
        ("rhmax", "Relative humidity max"),
        ("dewpoint", "Dewpoint"),
        ("precip", "Precipitation"),
        ("rs", "Solar radiation"),
        ("ea", "Vapor pressure"),
        ("wind_speed", "Wind speed"),
    ],
)
def test_empty_unit_with_value_fails(field, label):
    with pytest.raises(MissingUnitError) as exc:
        DailyReading.from_tuples(DAY, (10.0, "C"), (20.0, "C"), **{field: (1.0, "")})

    assert exc.value.field == field
    assert str(exc.value) == f"{label} units must not be empty when including a value"


def test_unrecognized_unit_is_accepted_at_construction():
    reading = DailyReading.from_tuples(
        DAY,
        (10.0, "kelvin"),
        (20.0, "C"),
        wind_speed=(3.0, "knots"),
    )

    assert reading.tmin == Measurement(10.0, "kelvin")
    assert reading.wind_speed.unit == "knots"


def test_absent_values_have_no_unit():
    reading = DailyReading.from_tuples(DAY, (10.0, "C"), (20.0, "C"))

    assert reading.rhmin is None
    assert reading.precip is None
    assert reading.wind_speed is None


def test_reading_is_immutable():
    reading = DailyReading.from_tuples(DAY, (10.0, "C"), (20.0, "C"))

    with pytest.raises(FrozenInstanceError):
        reading.tmin = Measurement(0.0, "C")


def test_direct_construction_validates_too():
    with pytest.raises(MissingUnitError):
        DailyReading(
            date=DAY,
            tmin=Measurement(10.0, "C"),
            tmax=Measurement(20.0, "C"),
            ea=Measurement(1.2, ""),
        )


@pytest.mark.parametrize(
    "tmin, tmax, field, label",
    [
        (None, (20.0, "C"), "tmin", "Temperature min"),
        ((10.0, "C"), None, "tmax", "Temperature max"),
        (None, None, "tmin", "Temperature min"),
    ],
)
def test_missing_temperature_fails(tmin, tmax, field, label):
    with pytest.raises(MissingValueError) as exc:
        DailyReading.from_tuples(DAY, tmin, tmax)

    assert isinstance(exc.value, UnitError)
    assert exc.value.field == field
    assert str(exc.value) == f"{label} is required"


def test_direct_construction_requires_temperatures():
    with pytest.raises(MissingValueError):
        DailyReading(date=DAY, tmin=Measurement(10.0, "C"), tmax=None)
