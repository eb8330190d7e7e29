from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Optional

# Standard anemometer height for agricultural weather stations.
REFERENCE_WIND_HEIGHT = 2.0


class CanonicalRecord:
    """
    Unit-normalized daily record consumed by RefET calculations.

    Units:
    - tmin, tmax, dewpoint: Celsius
    - rhmin, rhmax: percent
    - ea: kilopascals
    - rs: megajoules per square meter
    - ws: meters per second
    - wz (wind measurement height), z (elevation): meters
    - latitude: radians (assigned in degrees)
    """

    def __init__(
        self,
        tmax: float = 0.0,
        tmin: float = 0.0,
        rhmax: Optional[float] = None,
        rhmin: Optional[float] = None,
        dewpoint: Optional[float] = None,
        ea: Optional[float] = None,
        rs: Optional[float] = None,
        ws: Optional[float] = None,
        wz: Optional[float] = None,
        z: float = 0.0,
        latitude: float = 0.0,
        date: Optional[datetime] = None,
    ):
        self.tmax = tmax
        self.tmin = tmin
        self.rhmax = rhmax
        self.rhmin = rhmin
        self.dewpoint = dewpoint
        self.ea = ea
        self.rs = rs
        self.ws = ws
        self.wz = wz
        self.z = z
        self.latitude = latitude
        self.date = date if date is not None else datetime.now(timezone.utc)

    @property
    def wz(self) -> float:
        if self._wz is None:
            return REFERENCE_WIND_HEIGHT
        return self._wz

    @wz.setter
    def wz(self, value: Optional[float]) -> None:
        self._wz = value

    @property
    def latitude(self) -> float:
        """Latitude in radians."""
        return self._latitude

    @latitude.setter
    def latitude(self, degrees: float) -> None:
        self._latitude = math.radians(degrees)

    def __repr__(self) -> str:
        return (
            f"CanonicalRecord(date={self.date.isoformat()}, tmin={self.tmin}, tmax={self.tmax}, "
            f"ws={self.ws}, z={self.z}, latitude={self.latitude:.6f})"
        )
