import math
from datetime import datetime, timezone

import pytest

from station_normalizer.models.record import REFERENCE_WIND_HEIGHT, CanonicalRecord


def test_latitude_is_stored_in_radians():
    record = CanonicalRecord()
    record.latitude = 45.0

    assert record.latitude == pytest.approx(math.pi / 4, abs=1e-9)


def test_latitude_constructor_argument_is_degrees():
    record = CanonicalRecord(latitude=-90.0)

    assert record.latitude == pytest.approx(-math.pi / 2, abs=1e-9)


def test_wind_height_defaults_to_reference_height():
    record = CanonicalRecord()

    assert record.wz == REFERENCE_WIND_HEIGHT == 2.0


def test_wind_height_uses_supplied_value():
    record = CanonicalRecord(wz=10.0)
    assert record.wz == 10.0

    record.wz = None
    assert record.wz == 2.0


def test_defaults():
    record = CanonicalRecord()

    assert record.tmin == 0.0
    assert record.tmax == 0.0
    assert record.z == 0.0
    assert record.rhmin is None
    assert record.ws is None
    assert record.date.tzinfo is not None


def test_explicit_values():
    ts = datetime(2024, 1, 1, tzinfo=timezone.utc)
    record = CanonicalRecord(tmax=30.0, tmin=12.0, rhmax=80.0, ea=1.1, rs=25.0, ws=2.5, z=850.0, date=ts)

    assert (record.tmin, record.tmax) == (12.0, 30.0)
    assert record.rhmax == 80.0
    assert record.ea == 1.1
    assert record.rs == 25.0
    assert record.ws == 2.5
    assert record.z == 850.0
    assert record.date == ts
