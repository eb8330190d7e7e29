from datetime import date

import pytest

from station_normalizer.main import app
from station_normalizer.models.station import Station


@pytest.fixture
def test_app():
    """
    Return the FastAPI app instance.
    """
    return app


@pytest.fixture
def station():
    """
    A station at 40°N, 1200 m, with the anemometer at 3 m and one reading
    in mixed units.
    """
    st = Station(
        name="Test station",
        source="test",
        latitude=40.0,
        longitude=-105.0,
        elevation=1200.0,
        wind_height=3.0,
        id=1,
    )
    st.add_daily_reading(
        date(2024, 6, 1),
        (10.0, "°C"),
        (20.0, "°C"),
        wind_speed=(5.0, "mph"),
    )
    return st


@pytest.fixture
def station_payload():
    """
    JSON body for POST /stations/normalize.
    """
    return {
        "name": "Payload station",
        "source": "test",
        "latitude": 40.0,
        "longitude": -105.0,
        "elevation": 1200.0,
        "wind_height": 3.0,
        "id": 7,
        "readings": [
            {
                "date": "2024-06-01",
                "tmin": {"value": 50.0, "unit": "°F"},
                "tmax": {"value": 20.0, "unit": "C"},
                "rhmin": {"value": 35.0, "unit": "%"},
                "rhmax": {"value": 90.0, "unit": "percent"},
                "ea": {"value": 1500.0, "unit": "Pa"},
                "rs": {"value": 500.0, "unit": "L"},
                "wind_speed": {"value": 5.0, "unit": "mph"},
            },
            {
                "date": "2024-06-02",
                "tmin": {"value": 12.0, "unit": "degC"},
                "tmax": {"value": 24.0, "unit": "degC"},
            },
        ],
    }
