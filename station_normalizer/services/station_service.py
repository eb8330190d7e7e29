from __future__ import annotations

import logging
from typing import Optional

from station_normalizer.models.reading import DailyReading, Measurement
from station_normalizer.models.station import Station
from station_normalizer.schemas.stations import (
    CanonicalRecordOut,
    DailyReadingIn,
    MeasurementIn,
    NormalizationResponse,
    StationIn,
    StationOut,
)

logger = logging.getLogger(__name__)


class StationNormalizationService:
    """
    Maps API payloads onto the station model and back.

    All unit handling happens in the model; this service only translates
    between the request/response schemas and domain objects.
    """

    @staticmethod
    def _measurement(m: Optional[MeasurementIn]) -> Optional[Measurement]:
        if m is None:
            return None
        return Measurement(value=m.value, unit=m.unit)

    def build_reading(self, item: DailyReadingIn) -> DailyReading:
        return DailyReading(
            date=item.date,
            tmin=self._measurement(item.tmin),
            tmax=self._measurement(item.tmax),
            rhmin=self._measurement(item.rhmin),
            rhmax=self._measurement(item.rhmax),
            dewpoint=self._measurement(item.dewpoint),
            precip=self._measurement(item.precip),
            rs=self._measurement(item.rs),
            ea=self._measurement(item.ea),
            wind_speed=self._measurement(item.wind_speed),
        )

    def build_station(self, payload: StationIn) -> Station:
        """
        Build a station and its readings from a request payload.

        Raises:
            MissingUnitError: if any reading has a value with an empty unit.
        """
        station = Station(
            name=payload.name,
            source=payload.source,
            latitude=payload.latitude,
            longitude=payload.longitude,
            elevation=payload.elevation,
            wind_height=payload.wind_height,
            id=payload.id,
        )
        station.replace_readings(self.build_reading(item) for item in payload.readings)
        return station

    def normalize(self, payload: StationIn) -> NormalizationResponse:
        """
        Normalize every reading of the posted station.

        Raises:
            UnitError: on the first invalid reading; nothing is returned for
                the other readings.
        """
        station = self.build_station(payload)
        records = station.normalize()

        logger.info("Normalized %d readings for station %s (%s)", len(records), station.name, station.source)

        return NormalizationResponse(
            station=StationOut.model_validate(station),
            items=[CanonicalRecordOut.model_validate(r) for r in records],
            total=len(records),
        )
