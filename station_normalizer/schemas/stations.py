import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MeasurementIn(BaseModel):
    """
    A raw value and the unit abbreviation it was recorded in.
    """

    value: float
    unit: str = Field(..., description="Unit abbreviation as sent by the station (e.g. '°F', 'mph')")


class DailyReadingIn(BaseModel):
    """
    One station-day of raw measurements.
    """

    date: dt.date = Field(..., description="Observation date (calendar day)")
    tmin: MeasurementIn
    tmax: MeasurementIn
    rhmin: Optional[MeasurementIn] = None
    rhmax: Optional[MeasurementIn] = None
    dewpoint: Optional[MeasurementIn] = None
    precip: Optional[MeasurementIn] = None
    rs: Optional[MeasurementIn] = Field(default=None, description="Solar radiation")
    ea: Optional[MeasurementIn] = Field(default=None, description="Vapor pressure")
    wind_speed: Optional[MeasurementIn] = None


class StationIn(BaseModel):
    """
    Request body for normalizing a station's readings.
    """

    name: str
    source: str = Field(..., description="Data source label")
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")
    elevation: float = Field(..., description="Elevation in meters")
    wind_height: float = Field(..., description="Wind sensor height in meters")
    id: Optional[int] = None
    readings: list[DailyReadingIn] = Field(default_factory=list)


class StationOut(BaseModel):
    """
    Station metadata echoed back with the normalized records.
    """

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str
    source: str


class CanonicalRecordOut(BaseModel):
    """
    Public representation of a normalized daily record.
    """

    model_config = ConfigDict(from_attributes=True)

    date: dt.datetime = Field(..., description="Observation timestamp (00:00 UTC of the day)")
    tmin: float = Field(..., description="Minimum temperature (°C)")
    tmax: float = Field(..., description="Maximum temperature (°C)")
    rhmin: Optional[float] = Field(default=None, description="Minimum relative humidity (%)")
    rhmax: Optional[float] = Field(default=None, description="Maximum relative humidity (%)")
    dewpoint: Optional[float] = Field(default=None, description="Dewpoint (°C)")
    ea: Optional[float] = Field(default=None, description="Vapor pressure (kPa)")
    rs: Optional[float] = Field(default=None, description="Solar radiation (MJ/m²)")
    ws: Optional[float] = Field(default=None, description="Wind speed (m/s)")
    wz: float = Field(..., description="Wind measurement height (m)")
    z: float = Field(..., description="Elevation (m)")
    latitude: float = Field(..., description="Latitude (radians)")


class NormalizationResponse(BaseModel):
    """
    Response payload for a station normalization.
    """

    station: StationOut
    items: list[CanonicalRecordOut] = Field(default_factory=list)
    total: int
