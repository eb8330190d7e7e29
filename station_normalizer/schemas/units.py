from pydantic import BaseModel, Field


class UnitOut(BaseModel):
    """
    Public representation of a recognized unit.
    """

    code: str = Field(..., description="Stable unit identifier (e.g. 'celsius')")
    abbreviation: str = Field(..., description="Canonical display abbreviation")
    name: str
    quantity: str = Field(..., description="Quantity kind (temperature, speed, ...)")
    aliases: list[str] = Field(default_factory=list, description="Accepted input abbreviations")


class UnitListResponse(BaseModel):
    """
    Response payload for listing the unit taxonomy.
    """

    items: list[UnitOut] = Field(default_factory=list)
    total: int


class ConversionOut(BaseModel):
    """
    Result of converting a single value between two units.
    """

    value: float
    from_unit: UnitOut
    to_unit: UnitOut
    result: float
