from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from station_normalizer.core.errors import MissingUnitError, MissingValueError

RawPair = Tuple[float, str]

REQUIRED_FIELD_LABELS = {
    "tmin": "Temperature min",
    "tmax": "Temperature max",
}

# Field name -> label used in validation messages.
OPTIONAL_FIELD_LABELS = {
    "rhmin": "Relative humidity min",
    "rhmax": "Relative humidity max",
    "dewpoint": "Dewpoint",
    "precip": "Precipitation",
    "rs": "Solar radiation",
    "ea": "Vapor pressure",
    "wind_speed": "Wind speed",
}


@dataclass(frozen=True)
class Measurement:
    """A raw value together with the unit string it was recorded in."""

    value: float
    unit: str

    @classmethod
    def from_pair(cls, pair: Optional[RawPair]) -> Optional[Measurement]:
        if pair is None:
            return None
        value, unit = pair
        return cls(value=float(value), unit=unit)


@dataclass(frozen=True)
class DailyReading:
    """
    One station-day of raw measurements.

    `tmin` and `tmax` are mandatory; every other field is optional. Unit
    strings of optional measurements must be non-empty, which is checked
    here. Whether a unit string is actually recognized is only checked when
    the reading is normalized.
    """

    date: date
    tmin: Measurement
    tmax: Measurement
    rhmin: Optional[Measurement] = None
    rhmax: Optional[Measurement] = None
    dewpoint: Optional[Measurement] = None
    precip: Optional[Measurement] = None
    rs: Optional[Measurement] = None
    ea: Optional[Measurement] = None
    wind_speed: Optional[Measurement] = None

    def __post_init__(self):
        for name, label in REQUIRED_FIELD_LABELS.items():
            if getattr(self, name) is None:
                raise MissingValueError(name, label)
        for name, label in OPTIONAL_FIELD_LABELS.items():
            measurement = getattr(self, name)
            if measurement is not None and not measurement.unit:
                raise MissingUnitError(name, label)

    @classmethod
    def from_tuples(
        cls,
        date: date,
        tmin: RawPair,
        tmax: RawPair,
        rhmin: Optional[RawPair] = None,
        rhmax: Optional[RawPair] = None,
        dewpoint: Optional[RawPair] = None,
        precip: Optional[RawPair] = None,
        rs: Optional[RawPair] = None,
        ea: Optional[RawPair] = None,
        wind_speed: Optional[RawPair] = None,
    ) -> DailyReading:
        """
        Build a reading from `(value, unit)` tuples, `None` meaning absent.

        Raises:
            MissingUnitError: if a present optional value has an empty unit.
            MissingValueError: if `tmin` or `tmax` is `None`.
        """
        return cls(
            date=date,
            tmin=Measurement.from_pair(tmin),
            tmax=Measurement.from_pair(tmax),
            rhmin=Measurement.from_pair(rhmin),
            rhmax=Measurement.from_pair(rhmax),
            dewpoint=Measurement.from_pair(dewpoint),
            precip=Measurement.from_pair(precip),
            rs=Measurement.from_pair(rs),
            ea=Measurement.from_pair(ea),
            wind_speed=Measurement.from_pair(wind_speed),
        )

