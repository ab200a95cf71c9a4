from forecast_forge.core.dice import Dice
from forecast_forge.weather.config import ForecastConfig
from forecast_forge.weather.temperature import TemperatureModel


def test_generate_stays_in_range_plus_time_of_day(tables):
    model = TemperatureModel(tables)
    dice = Dice(seed=3)
    # temperate summer rain is 75..95, 14:00 adds 10
    for _ in range(200):
        assert 85 <= model.generate("Rain", "temperate", "summer", 14, dice) <= 105


def test_scorching_heat_never_drops_below_ninety(tables):
    model = TemperatureModel(tables)
    dice = Dice(seed=4)
    for _ in range(200):
        assert model.generate("Scorching Heat", "desert", "summer", 4, dice) >= 90


def test_snow_stays_at_or_below_freezing(tables):
    model = TemperatureModel(tables)
    dice = Dice(seed=5)
    # boreal spring snow is 20..40 before the cap
    for _ in range(200):
        assert model.generate("Snow", "mountain", "spring", 14, dice) <= 32


def test_missing_range_returns_default(tables, logs):
    model = TemperatureModel(tables, ForecastConfig(default_temperature=64))
    assert model.generate("Blizzard", "desert", "summer", 12, Dice(seed=1)) == 64
    assert logs


def test_smooth_limits_hourly_change(tables):
    model = TemperatureModel(tables)
    assert model.smooth(50, 70) == 55
    assert model.smooth(50, 30) == 45
    assert model.smooth(50, 47) == 47
    assert model.smooth(None, 80) == 80


def test_smooth_uses_configured_step(tables):
    model = TemperatureModel(tables, ForecastConfig(max_temp_change=3))
    assert model.smooth(50, 70) == 53
