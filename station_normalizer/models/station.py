from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional

from station_normalizer.core.errors import UnitError
from station_normalizer.models.reading import DailyReading, RawPair
from station_normalizer.models.record import CanonicalRecord
from station_normalizer.services.normalization import normalize_reading

logger = logging.getLogger(__name__)


@dataclass
class Station:
    """
    Weather station metadata and its daily readings.

    Readings keep insertion order, which callers are expected to make
    chronological. Coordinates are in degrees; elevation and wind sensor
    height are in meters.
    """

    name: str
    source: str
    latitude: float
    longitude: float
    elevation: float
    wind_height: float
    id: Optional[int] = None
    readings: List[DailyReading] = field(default_factory=list)

    def add_daily_reading(
        self,
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
        Validate and append one reading built from `(value, unit)` tuples.

        Raises:
            MissingValueError: if `tmin` or `tmax` is `None`.
            MissingUnitError: if a present optional value has an empty unit.
                Nothing is appended in that case.
        """
        reading = DailyReading.from_tuples(
            date,
            tmin,
            tmax,
            rhmin=rhmin,
            rhmax=rhmax,
            dewpoint=dewpoint,
            precip=precip,
            rs=rs,
            ea=ea,
            wind_speed=wind_speed,
        )
        self.readings.append(reading)
        return reading

    def replace_readings(self, readings: Iterable[DailyReading]) -> None:
        # Readings are already validated at construction.
        self.readings = list(readings)

    def normalize(self) -> List[CanonicalRecord]:
        """
        Normalize every reading, in order, attaching station context.

        The first failing reading aborts the whole batch and no partial
        results are returned.

        Raises:
            FieldUnitError: for the first reading that cannot be normalized.
        """
        logger.debug("Normalizing %d readings for station %s", len(self.readings), self.name)

        records: List[CanonicalRecord] = []
        for reading in self.readings:
            try:
                record = normalize_reading(reading)
            except UnitError as e:
                logger.warning("Station %s (%s): %s", self.name, self.source, e)
                raise

            record.latitude = self.latitude
            record.z = self.elevation
            record.wz = self.wind_height
            records.append(record)

        return records
