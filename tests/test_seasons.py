from datetime import datetime

import pytest

from forecast_forge.weather.seasons import resolve_season, season_from_date


@pytest.mark.parametrize("date, season", [
    (datetime(2024, 1, 15), "winter"),
    (datetime(2024, 3, 19, 23, 0), "winter"),
    (datetime(2024, 3, 20, 8, 0), "spring"),
    (datetime(2024, 3, 20, 11, 59), "spring"),
    (datetime(2024, 3, 20, 12, 0), "spring"),
    (datetime(2024, 6, 21, 12), "summer"),
    (datetime(2024, 8, 1), "summer"),
    (datetime(2024, 9, 22, 12), "fall"),
    (datetime(2024, 12, 20, 23), "fall"),
    (datetime(2024, 12, 21, 11), "winter"),
    (datetime(2024, 12, 21, 12), "winter"),
    (datetime(2024, 12, 31, 23), "winter"),
])
def test_season_from_date(date, season):
    assert season_from_date(date) == season


def test_resolve_season():
    jan = datetime(2024, 1, 2)
    assert resolve_season("auto", jan) == "winter"
    assert resolve_season("summer", jan) == "summer"
