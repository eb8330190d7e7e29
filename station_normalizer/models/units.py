"""
Unit taxonomy and pairwise conversion table.

Every physical unit understood by the normalizer is a member of `Unit`.
Abbreviations coming from station data are resolved with `parse_unit`
through an exact-string alias table, and values are moved between two
units with `convert`.

The conversion table is keyed by ordered `(from, to)` pairs. Each supported
direction has its own entry and no chaining through intermediate units is
attempted: a pair without an entry fails even if a path exists.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, List, Tuple

from station_normalizer.core.errors import UnrecognizedUnitError, UnsupportedConversionError

SECONDS_PER_DAY = 86400.0
METERS_PER_MILE = 1609.344


class Quantity(str, Enum):
    """Physical quantity kinds the units are grouped by."""

    TEMPERATURE = "temperature"
    LENGTH = "length"
    RADIATION = "radiation"
    PRESSURE = "pressure"
    ANGLE = "angle"
    SPEED = "speed"
    AREA = "area"
    RATIO = "ratio"


class Unit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    MILLIMETERS = "millimeters"
    CENTIMETERS = "centimeters"
    METERS = "meters"
    KILOMETERS = "kilometers"
    INCHES = "inches"
    FEET = "feet"
    YARDS = "yards"
    MILES = "miles"
    LANGLEY = "langley"
    MEGAJOULES_PER_SQUARE_METER = "megajoules_per_square_meter"
    WATTS_PER_SQUARE_METER = "watts_per_square_meter"
    PASCALS = "pascals"
    KILOPASCALS = "kilopascals"
    DEGREES = "degrees"
    RADIANS = "radians"
    METERS_PER_SECOND = "meters_per_second"
    MILES_PER_HOUR = "miles_per_hour"
    ACRES = "acres"
    HECTARES = "hectares"
    SQUARE_FEET = "square_feet"
    SQUARE_METERS = "square_meters"
    PERCENT = "percent"

    @property
    def abbreviation(self) -> str:
        """Canonical display abbreviation, e.g. `°C`."""
        return _UNIT_INFO[self][0]

    @property
    def display_name(self) -> str:
        return _UNIT_INFO[self][1]

    @property
    def quantity(self) -> Quantity:
        return _UNIT_INFO[self][2]

    @property
    def aliases(self) -> List[str]:
        """Accepted input abbreviations for this unit, in table order."""
        return [abbr for abbr, unit in _ALIASES.items() if unit is self]

    def is_convertible_to(self, other: Unit) -> bool:
        return (self, other) in _CONVERSIONS

    def convert(self, value: float, to_unit: Unit) -> float:
        return convert(value, self, to_unit)


# (display abbreviation, human-readable name, quantity)
_UNIT_INFO: Dict[Unit, Tuple[str, str, Quantity]] = {
    Unit.CELSIUS: ("°C", "Celsius", Quantity.TEMPERATURE),
    Unit.FAHRENHEIT: ("°F", "Fahrenheit", Quantity.TEMPERATURE),
    Unit.MILLIMETERS: ("mm", "Millimeters", Quantity.LENGTH),
    Unit.CENTIMETERS: ("cm", "Centimeters", Quantity.LENGTH),
    Unit.METERS: ("m", "Meters", Quantity.LENGTH),
    Unit.KILOMETERS: ("km", "Kilometers", Quantity.LENGTH),
    Unit.INCHES: ("in", "Inches", Quantity.LENGTH),
    Unit.FEET: ("ft", "Feet", Quantity.LENGTH),
    Unit.YARDS: ("yd", "Yards", Quantity.LENGTH),
    Unit.MILES: ("mi", "Miles", Quantity.LENGTH),
    Unit.LANGLEY: ("L", "Langley", Quantity.RADIATION),
    Unit.MEGAJOULES_PER_SQUARE_METER: ("MJ/m²", "MegaJoules/Meter²", Quantity.RADIATION),
    Unit.WATTS_PER_SQUARE_METER: ("W/m²", "Watts", Quantity.RADIATION),
    Unit.PASCALS: ("Pa", "Pascals", Quantity.PRESSURE),
    Unit.KILOPASCALS: ("kPa", "KiloPascals", Quantity.PRESSURE),
    Unit.DEGREES: ("°", "Degrees", Quantity.ANGLE),
    Unit.RADIANS: ("rad", "Radians", Quantity.ANGLE),
    Unit.METERS_PER_SECOND: ("m/s", "Meters/Second", Quantity.SPEED),
    Unit.MILES_PER_HOUR: ("mph", "Miles/Hour", Quantity.SPEED),
    Unit.ACRES: ("acres", "Acres", Quantity.AREA),
    Unit.HECTARES: ("ha", "Hectares", Quantity.AREA),
    Unit.SQUARE_FEET: ("ft²", "Square Feet", Quantity.AREA),
    Unit.SQUARE_METERS: ("m²", "Square Meters", Quantity.AREA),
    Unit.PERCENT: ("%", "Percent", Quantity.RATIO),
}


# Upstream data sources depend on these exact strings. Matching is
# case-sensitive; new spellings need a new entry here.
_ALIASES: Dict[str, Unit] = {
    # temperature
    "°C": Unit.CELSIUS,
    "C": Unit.CELSIUS,
    "c": Unit.CELSIUS,
    "degC": Unit.CELSIUS,
    "°F": Unit.FAHRENHEIT,
    "F": Unit.FAHRENHEIT,
    "f": Unit.FAHRENHEIT,
    "degF": Unit.FAHRENHEIT,
    # length
    "mm": Unit.MILLIMETERS,
    "cm": Unit.CENTIMETERS,
    "m": Unit.METERS,
    "km": Unit.KILOMETERS,
    "KM": Unit.KILOMETERS,
    "in": Unit.INCHES,
    "ft": Unit.FEET,
    "yd": Unit.YARDS,
    "mi": Unit.MILES,
    # radiation
    "L": Unit.LANGLEY,
    "MJ/m²": Unit.MEGAJOULES_PER_SQUARE_METER,
    "mj/m²": Unit.MEGAJOULES_PER_SQUARE_METER,
    "mj/m2": Unit.MEGAJOULES_PER_SQUARE_METER,
    "mj/m^2": Unit.MEGAJOULES_PER_SQUARE_METER,
    "mJ/m^2": Unit.MEGAJOULES_PER_SQUARE_METER,
    "W/m²": Unit.WATTS_PER_SQUARE_METER,
    "w/m²": Unit.WATTS_PER_SQUARE_METER,
    "W/m-2": Unit.WATTS_PER_SQUARE_METER,
    "w/m-2": Unit.WATTS_PER_SQUARE_METER,
    # pressure
    "Pa": Unit.PASCALS,
    "pa": Unit.PASCALS,
    "kpa": Unit.KILOPASCALS,
    "kPa": Unit.KILOPASCALS,
    "KPA": Unit.KILOPASCALS,
    "KPa": Unit.KILOPASCALS,
    # angle
    "°": Unit.DEGREES,
    "deg": Unit.DEGREES,
    "rad": Unit.RADIANS,
    # speed
    "m/s": Unit.METERS_PER_SECOND,
    "mph": Unit.MILES_PER_HOUR,
    # area
    "acres": Unit.ACRES,
    "ha": Unit.HECTARES,
    "ft²": Unit.SQUARE_FEET,
    "sq ft": Unit.SQUARE_FEET,
    "ft2": Unit.SQUARE_FEET,
    "m²": Unit.SQUARE_METERS,
    "sq m": Unit.SQUARE_METERS,
    "m2": Unit.SQUARE_METERS,
    # ratio
    "%": Unit.PERCENT,
    "percent": Unit.PERCENT,
    "Percent": Unit.PERCENT,
}


_CONVERSIONS: Dict[Tuple[Unit, Unit], Callable[[float], float]] = {
    # temperature
    (Unit.CELSIUS, Unit.FAHRENHEIT): lambda v: v * 9.0 / 5.0 + 32.0,
    (Unit.FAHRENHEIT, Unit.CELSIUS): lambda v: (v - 32.0) * 5.0 / 9.0,
    # length
    (Unit.MILLIMETERS, Unit.CENTIMETERS): lambda v: v / 10.0,
    (Unit.CENTIMETERS, Unit.MILLIMETERS): lambda v: v * 10.0,
    (Unit.METERS, Unit.KILOMETERS): lambda v: v / 1000.0,
    (Unit.KILOMETERS, Unit.METERS): lambda v: v * 1000.0,
    (Unit.INCHES, Unit.FEET): lambda v: v / 12.0,
    (Unit.FEET, Unit.INCHES): lambda v: v * 12.0,
    (Unit.YARDS, Unit.METERS): lambda v: v * 0.9144,
    (Unit.METERS, Unit.YARDS): lambda v: v / 0.9144,
    (Unit.MILES, Unit.KILOMETERS): lambda v: v * 1.60934,
    (Unit.KILOMETERS, Unit.MILES): lambda v: v / 1.60934,
    # radiation
    (Unit.LANGLEY, Unit.MEGAJOULES_PER_SQUARE_METER): lambda v: v * 0.04184,
    (Unit.MEGAJOULES_PER_SQUARE_METER, Unit.LANGLEY): lambda v: v / 0.04184,
    (Unit.WATTS_PER_SQUARE_METER, Unit.MEGAJOULES_PER_SQUARE_METER): lambda v: v / 3600000.0,
    (Unit.MEGAJOULES_PER_SQUARE_METER, Unit.WATTS_PER_SQUARE_METER): lambda v: v * 3600000.0,
    # pressure
    (Unit.KILOPASCALS, Unit.PASCALS): lambda v: v * 1000.0,
    (Unit.PASCALS, Unit.KILOPASCALS): lambda v: v / 1000.0,
    # angle
    (Unit.DEGREES, Unit.RADIANS): lambda v: v * math.pi / 180.0,
    (Unit.RADIANS, Unit.DEGREES): lambda v: v * 180.0 / math.pi,
    # speed
    (Unit.METERS_PER_SECOND, Unit.MILES_PER_HOUR): lambda v: v * 2.23694,
    (Unit.MILES_PER_HOUR, Unit.METERS_PER_SECOND): lambda v: v / 2.23694,
    # distance travelled in one day (run of wind) -> mean speed
    (Unit.MILES, Unit.METERS_PER_SECOND): lambda v: v * METERS_PER_MILE / SECONDS_PER_DAY,
    (Unit.METERS, Unit.METERS_PER_SECOND): lambda v: v / SECONDS_PER_DAY,
    (Unit.KILOMETERS, Unit.METERS_PER_SECOND): lambda v: v * 1000.0 / SECONDS_PER_DAY,
    # area
    (Unit.ACRES, Unit.SQUARE_METERS): lambda v: v * 4046.86,
    (Unit.SQUARE_METERS, Unit.ACRES): lambda v: v / 4046.86,
    (Unit.HECTARES, Unit.SQUARE_METERS): lambda v: v * 10000.0,
    (Unit.SQUARE_METERS, Unit.HECTARES): lambda v: v / 10000.0,
    (Unit.SQUARE_FEET, Unit.SQUARE_METERS): lambda v: v / 10.7639,
    (Unit.SQUARE_METERS, Unit.SQUARE_FEET): lambda v: v * 10.7639,
    (Unit.HECTARES, Unit.ACRES): lambda v: v / 2.47105,
    (Unit.ACRES, Unit.HECTARES): lambda v: v * 2.47105,
}


def parse_unit(abbreviation: str) -> Unit:
    """
    Resolve an abbreviation string to a `Unit`.

    Raises:
        UnrecognizedUnitError: if the string is not in the alias table.
    """
    try:
        return _ALIASES[abbreviation]
    except KeyError:
        raise UnrecognizedUnitError(abbreviation) from None


def convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """
    Convert `value` from `from_unit` to `to_unit`.

    Only directly tabulated pairs succeed. Converting a unit to itself is
    not tabulated either.

    Raises:
        UnsupportedConversionError: if the pair has no table entry.
    """
    rule = _CONVERSIONS.get((from_unit, to_unit))
    if rule is None:
        raise UnsupportedConversionError(from_unit, to_unit)
    return rule(float(value))


def list_units() -> List[Unit]:
    """All units in declaration order."""
    return list(Unit)
