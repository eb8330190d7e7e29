from fastapi import APIRouter, HTTPException

from station_normalizer.core.errors import FieldUnitError, MissingUnitError, MissingValueError, UnitError
from station_normalizer.schemas.stations import NormalizationResponse, StationIn
from station_normalizer.services.station_service import StationNormalizationService

router = APIRouter(prefix="/stations", tags=["Stations"])


def _error_detail(e: UnitError) -> dict:
    detail = {"message": str(e)}
    if isinstance(e, FieldUnitError):
        detail["field"] = e.field
        detail["unit"] = e.unit
        detail["date"] = e.date.isoformat() if e.date else None
    elif isinstance(e, (MissingUnitError, MissingValueError)):
        detail["field"] = e.field
    return detail


@router.post(
    "/normalize",
    response_model=NormalizationResponse,
    summary="Normalize a station's daily readings",
    description=(
        "Converts every daily reading of the posted station into canonical units "
        "(°C, %, kPa, MJ/m², m/s, latitude in radians).\n\n"
        "- Records are returned in the same order as the readings.\n"
        "- The first reading with an empty or unrecognized unit fails the whole request "
        "with HTTP 422; no partial results are returned."
    ),
)
def normalize_station(payload: StationIn) -> NormalizationResponse:
    """
    Station normalization endpoint.
    """
    try:
        return StationNormalizationService().normalize(payload)
    except UnitError as e:
        raise HTTPException(status_code=422, detail=_error_detail(e))
