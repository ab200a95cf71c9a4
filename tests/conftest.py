from datetime import datetime

import pytest

from forecast_forge.core.context import ForecastContext
from forecast_forge.weather.climate import WeatherTables


@pytest.fixture
def logs():
    return []


@pytest.fixture
def tables(logs):
    return WeatherTables(log=logs.append)


@pytest.fixture
def ctx(logs):
    return ForecastContext(master_seed=7, log=logs.append)


@pytest.fixture
def start():
    return datetime(2024, 7, 1, 8, 0)
