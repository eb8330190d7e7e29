from __future__ import annotations

from datetime import date
from typing import Optional


class UnitError(ValueError):
    """
    Base class for every unit-related failure.

    All unit problems raised by the taxonomy, the daily readings and the
    normalization pipeline derive from this class, so callers can catch a
    single recoverable error kind and report it per record.
    """


class UnrecognizedUnitError(UnitError):
    """An abbreviation string has no entry in the unit alias table."""

    def __init__(self, abbreviation: str):
        self.abbreviation = abbreviation
        super().__init__(f"Invalid unit: {abbreviation}")


class UnsupportedConversionError(UnitError):
    """The conversion table has no direct entry for the requested pair."""

    def __init__(self, from_unit, to_unit):
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(
            f"Unsupported conversion from {from_unit.display_name} to {to_unit.display_name}"
        )


class MissingUnitError(UnitError):
    """An optional value was supplied together with an empty unit string."""

    def __init__(self, field: str, label: str):
        self.field = field
        self.label = label
        super().__init__(f"{label} units must not be empty when including a value")


class FieldUnitError(UnitError):
    """
    A unit string is not recognized for a particular field.

    Raised by normalization when the unit is unknown altogether or is a
    known unit the field does not accept (e.g. `mph` for vapor pressure).
    """

    def __init__(self, field: str, unit: str, on_date: Optional[date] = None):
        self.field = field
        self.unit = unit
        self.date = on_date
        where = f" on {on_date.isoformat()}" if on_date is not None else ""
        super().__init__(f"Invalid units for {field}{where}: '{unit}'")


class MissingValueError(UnitError):
    """A mandatory measurement (tmin or tmax) was not supplied."""

    def __init__(self, field: str, label: str):
        self.field = field
        self.label = label
        super().__init__(f"{label} is required")
