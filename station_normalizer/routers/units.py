from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from station_normalizer.core.errors import UnitError
from station_normalizer.models.units import Quantity, Unit, list_units, parse_unit
from station_normalizer.schemas.units import ConversionOut, UnitListResponse, UnitOut

router = APIRouter(prefix="/units", tags=["Units"])


def _unit_out(unit: Unit) -> UnitOut:
    return UnitOut(
        code=unit.value,
        abbreviation=unit.abbreviation,
        name=unit.display_name,
        quantity=unit.quantity.value,
        aliases=unit.aliases,
    )


@router.get(
    "",
    response_model=UnitListResponse,
    summary="List recognized units",
    description="Returns every unit the normalizer understands, with its accepted input abbreviations.",
)
def get_units(
    quantity: Optional[Quantity] = Query(default=None, description="Filter by quantity kind"),
) -> UnitListResponse:
    units = [u for u in list_units() if quantity is None or u.quantity is quantity]
    return UnitListResponse(items=[_unit_out(u) for u in units], total=len(units))


@router.get(
    "/convert",
    response_model=ConversionOut,
    summary="Convert a value between two units",
    description=(
        "Converts a single value using the direct conversion table.\n\n"
        "- Units are given as abbreviations (e.g. `°F`, `kPa`).\n"
        "- Only directly tabulated pairs are supported; there is no chaining through "
        "intermediate units, so some physically valid pairs return 422."
    ),
)
def convert_value(
    value: float = Query(..., description="Value to convert"),
    from_unit: str = Query(..., description="Source unit abbreviation"),
    to_unit: str = Query(..., description="Target unit abbreviation"),
) -> ConversionOut:
    try:
        source = parse_unit(from_unit)
        target = parse_unit(to_unit)
        result = source.convert(value, target)
    except UnitError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return ConversionOut(
        value=value,
        from_unit=_unit_out(source),
        to_unit=_unit_out(target),
        result=result,
    )
