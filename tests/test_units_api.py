import pytest
from httpx import AsyncClient, ASGITransport


@pytest.mark.asyncio
async def test_list_units(test_app):
    """
    GET /units returns the full taxonomy with aliases.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        r = await ac.get("/units")

    assert r.status_code == 200
    data = r.json()
    assert data["total"] == 24
    assert len(data["items"]) == 24

    celsius = data["items"][0]
    assert celsius["code"] == "celsius"
    assert celsius["abbreviation"] == "°C"
    assert celsius["quantity"] == "temperature"
    assert "degC" in celsius["aliases"]


@pytest.mark.asyncio
async def test_list_units_filter_by_quantity(test_app):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        r = await ac.get("/units", params={"quantity": "pressure"})

    assert r.status_code == 200
    data = r.json()
    assert data["total"] == 2
    assert {x["code"] for x in data["items"]} == {"pascals", "kilopascals"}


@pytest.mark.asyncio
async def test_convert_value(test_app):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        r = await ac.get("/units/convert", params={"value": 25.0, "from_unit": "C", "to_unit": "°F"})

    assert r.status_code == 200
    data = r.json()
    assert data["result"] == 77.0
    assert data["from_unit"]["code"] == "celsius"
    assert data["to_unit"]["code"] == "fahrenheit"


@pytest.mark.asyncio
async def test_convert_unsupported_pair(test_app):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        r = await ac.get("/units/convert", params={"value": 1.0, "from_unit": "°C", "to_unit": "m"})

    assert r.status_code == 422
    assert r.json()["detail"] == "Unsupported conversion from Celsius to Meters"


@pytest.mark.asyncio
async def test_convert_unknown_unit(test_app):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        r = await ac.get("/units/convert", params={"value": 1.0, "from_unit": "knots", "to_unit": "m/s"})

    assert r.status_code == 422
    assert r.json()["detail"] == "Invalid unit: knots"
