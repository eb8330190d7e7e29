from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, FrozenSet, Optional

from station_normalizer.core.dates import utc_midnight
from station_normalizer.core.errors import FieldUnitError, UnitError
from station_normalizer.models.reading import DailyReading, Measurement
from station_normalizer.models.record import CanonicalRecord
from station_normalizer.models.units import Unit, convert, parse_unit


@dataclass(frozen=True)
class FieldPolicy:
    """Source units a field accepts and the canonical unit it is stored in."""

    accepted: FrozenSet[Unit]
    target: Unit


_TEMPERATURE = FieldPolicy(
    accepted=frozenset({Unit.CELSIUS, Unit.FAHRENHEIT}),
    target=Unit.CELSIUS,
)
_RELATIVE_HUMIDITY = FieldPolicy(
    accepted=frozenset({Unit.PERCENT}),
    target=Unit.PERCENT,
)

# Reading field -> policy, in the order fields are normalized.
FIELD_POLICIES: Dict[str, FieldPolicy] = {
    "tmin": _TEMPERATURE,
    "tmax": _TEMPERATURE,
    "dewpoint": _TEMPERATURE,
    "rhmin": _RELATIVE_HUMIDITY,
    "rhmax": _RELATIVE_HUMIDITY,
    "ea": FieldPolicy(
        accepted=frozenset({Unit.KILOPASCALS, Unit.PASCALS}),
        target=Unit.KILOPASCALS,
    ),
    "rs": FieldPolicy(
        accepted=frozenset(
            {
                Unit.MEGAJOULES_PER_SQUARE_METER,
                Unit.WATTS_PER_SQUARE_METER,
                Unit.LANGLEY,
            }
        ),
        target=Unit.MEGAJOULES_PER_SQUARE_METER,
    ),
    "wind_speed": FieldPolicy(
        accepted=frozenset(
            {
                Unit.METERS_PER_SECOND,
                Unit.MILES_PER_HOUR,
                Unit.MILES,
                Unit.METERS,
                Unit.KILOMETERS,
            }
        ),
        target=Unit.METERS_PER_SECOND,
    ),
}

# Reading field -> CanonicalRecord attribute, where the names differ.
_RECORD_ATTRIBUTES = {"wind_speed": "ws"}


def normalize_measurement(
    field: str,
    measurement: Measurement,
    on_date: Optional[date] = None,
) -> float:
    """
    Resolve a measurement's unit and express its value in the field's
    canonical unit.

    Raises:
        FieldUnitError: if the unit string is unknown, or is a unit the
            field does not accept.
    """
    policy = FIELD_POLICIES[field]
    try:
        unit = parse_unit(measurement.unit)
        if unit not in policy.accepted:
            raise FieldUnitError(field, measurement.unit, on_date)
        if unit is policy.target:
            return measurement.value
        return convert(measurement.value, unit, policy.target)
    except FieldUnitError:
        raise
    except UnitError as e:
        raise FieldUnitError(field, measurement.unit, on_date) from e


def normalize_reading(reading: DailyReading) -> CanonicalRecord:
    """
    Turn one daily reading into a canonical record.

    Station context (latitude, elevation, wind height) is not known here and
    is assigned by the caller. Precipitation has no canonical counterpart
    and is not carried over.

    Raises:
        FieldUnitError: on the first field whose unit cannot be normalized.
    """
    record = CanonicalRecord(date=utc_midnight(reading.date))

    for field in FIELD_POLICIES:
        measurement = getattr(reading, field)
        if measurement is None:
            continue
        value = normalize_measurement(field, measurement, reading.date)
        setattr(record, _RECORD_ATTRIBUTES.get(field, field), value)

    return record
